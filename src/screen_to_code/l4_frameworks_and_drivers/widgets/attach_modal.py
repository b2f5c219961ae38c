"""Attach modal — text input for staging one or more image files by path."""

from __future__ import annotations

import shlex
import sys

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Input, Static


def parse_paths(text: str) -> list[str]:
    """Split a line of paths on whitespace or commas; quotes keep spaces inside one path."""
    try:
        tokens = shlex.split(text.replace(',', ' '), posix=sys.platform != 'win32')
    except ValueError:
        tokens = text.replace(',', ' ').split()
    return [t.strip('"\'') for t in tokens if t.strip('"\'')]


class AttachModal(ModalScreen[list[str] | None]):
    """Modal that prompts for image paths. Enter → return paths, Escape → None."""

    DEFAULT_CSS = """
    AttachModal {
        align: center middle;
    }

    AttachModal > Vertical {
        width: 80;
        height: auto;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }

    AttachModal > Vertical > #attach-title {
        text-style: bold;
        margin-bottom: 1;
    }

    AttachModal > Vertical > #attach-hint {
        color: $text-muted;
        margin-top: 1;
        text-align: center;
    }
    """

    BINDINGS = [('escape', 'cancel', 'Cancel')]

    def __init__(self, remaining: int, **kwargs) -> None:
        super().__init__(**kwargs)
        self._remaining = remaining

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static(f'Attach screenshots ({self._remaining} slot(s) left)', id='attach-title')
            yield Input(placeholder='~/shots/home.png ~/shots/"about page.png"', id='attach-input')
            yield Static('Enter to attach · Escape to cancel', id='attach-hint')

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        paths = parse_paths(event.value)
        self.dismiss(paths if paths else None)

    def action_cancel(self) -> None:
        self.dismiss(None)
