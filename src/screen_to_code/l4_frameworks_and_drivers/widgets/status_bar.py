"""Status bar — bottom bar showing send state, staged image count, and keybinding hints."""

from __future__ import annotations

import time

from rich.cells import cell_len
from textual.reactive import reactive
from textual.widgets import Static

_SPINNER_CHARS = '⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏'


def _spinner_frame(elapsed: float) -> str:
    return _SPINNER_CHARS[int(elapsed * 10) % len(_SPINNER_CHARS)]


class StatusBar(Static):
    """Bottom status bar with in-flight state, image capacity, and keybinding hints."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: auto;
        background: $surface;
        color: $text;
        padding: 0 1;
        overflow: hidden hidden;
    }
    """

    sending: reactive[bool] = reactive(False)
    image_count: reactive[int] = reactive(0)
    image_max: reactive[int] = reactive(5)
    turn_count: reactive[int] = reactive(0)
    mode_label: reactive[str] = reactive('')
    keybinding_hints: reactive[str] = reactive('')

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._send_started = 0.0

    def watch_sending(self, value: bool) -> None:
        """Restart the spinner clock on each new send."""
        if value:
            self._send_started = time.monotonic()

    def render(self) -> str:
        if self.sending:
            elapsed = time.monotonic() - self._send_started
            status_icon = f'{_spinner_frame(elapsed)} Generating… {int(elapsed)}s'
        else:
            status_icon = '○ Ready'

        left_parts = []
        if self.mode_label:
            left_parts.append(self.mode_label)
        left_parts.extend(
            [
                status_icon,
                f'images {self.image_count}/{self.image_max}',
                f'turns {self.turn_count}',
            ]
        )
        left = ' │ '.join(left_parts)

        content_width = (self.size.width or 80) - 2

        hints = self.keybinding_hints
        if hints:
            hints_width = cell_len(hints.replace(r'\[', '['))
            gap = content_width - cell_len(left) - hints_width
            if gap >= 2:
                left = left + ' ' * gap + hints
        return left
