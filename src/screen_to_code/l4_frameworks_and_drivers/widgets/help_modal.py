"""Help modal — usage notes plus a keybinding table generated from the app's bindings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Markdown, Static


def key_label(key: str) -> str:
    """``ctrl+o`` stays as typed; single named keys are capitalised (``f1`` → ``F1``)."""
    if '+' in key:
        return key
    return key.upper() if key.startswith('f') and key[1:].isdigit() else key.capitalize()


def keybinding_table(bindings: Iterable[Binding], extra_keys: Sequence[tuple[str, str]] = ()) -> str:
    """Markdown table with one row per binding, in declaration order, then *extra_keys*."""
    rows = ['| Key | Action |', '|-----|--------|']
    for binding in bindings:
        rows.append(f'| `{key_label(binding.key)}` | {binding.description} |')
    for key, action in extra_keys:
        rows.append(f'| `{key}` | {action} |')
    return '\n'.join(rows)


class HelpModal(ModalScreen[None]):
    """Usage notes followed by the keybinding reference. Escape or F1 closes it."""

    DEFAULT_CSS = """
    HelpModal {
        align: center middle;
    }

    HelpModal > VerticalScroll {
        width: 60%;
        max-width: 80;
        height: auto;
        max-height: 80%;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }

    HelpModal > VerticalScroll > #help-body {
        height: auto;
    }

    HelpModal > VerticalScroll > #help-hint {
        text-align: center;
        color: $text-muted;
    }
    """

    BINDINGS = [
        ('escape', 'dismiss', 'Close'),
        ('f1', 'dismiss', 'Close'),
    ]

    def __init__(
        self,
        intro_md: str,
        bindings: Iterable[Binding],
        extra_keys: Sequence[tuple[str, str]] = (),
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.body_md = f'{intro_md}\n\n### Keybindings\n{keybinding_table(bindings, extra_keys)}'

    def compose(self) -> ComposeResult:
        with VerticalScroll():
            yield Markdown(self.body_md, id='help-body')
            yield Static('Press Escape or F1 to close', id='help-hint')
