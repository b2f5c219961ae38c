"""Code reply view — code / preview / copy control for a generated-code reply."""

from __future__ import annotations

import pyperclip
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.reactive import reactive
from textual.widgets import Button, Markdown, Static

from screen_to_code.l2_use_cases.utils.code_render import render_text_preview, strip_code_fence


class CodeReplyView(Vertical):
    """Shows a RawText reply either as raw code or as a text-mode page preview."""

    DEFAULT_CSS = """
    CodeReplyView {
        height: auto;
        border: solid $secondary;
        padding: 0 1;
    }
    CodeReplyView > .code-actions {
        height: auto;
    }
    CodeReplyView > .code-actions > Button {
        margin-right: 1;
        min-width: 10;
    }
    CodeReplyView > #code-view {
        height: auto;
    }
    CodeReplyView > #preview-view {
        height: auto;
        border: thick $primary;
        padding: 1 2;
    }
    """

    view_mode: reactive[str] = reactive('code', init=False)

    def __init__(self, raw_text: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self._code = strip_code_fence(raw_text)

    @property
    def code(self) -> str:
        return self._code

    def compose(self) -> ComposeResult:
        with Horizontal(classes='code-actions'):
            yield Button('Code', id='show-code')
            yield Button('Preview', id='show-preview')
            yield Button('Copy Code', id='copy-code')
        yield Markdown(f'```html\n{self._code}\n```', id='code-view')
        yield Static(render_text_preview(self._code) or '(nothing to preview)', id='preview-view', markup=False)

    def on_mount(self) -> None:
        self._apply_mode(self.view_mode)

    def watch_view_mode(self, mode: str) -> None:
        if self.is_mounted:
            self._apply_mode(mode)

    def _apply_mode(self, mode: str) -> None:
        self.query_one('#code-view', Markdown).display = mode == 'code'
        self.query_one('#preview-view', Static).display = mode == 'preview'

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == 'show-code':
            self.view_mode = 'code'
        elif event.button.id == 'show-preview':
            self.view_mode = 'preview'
        elif event.button.id == 'copy-code':
            self.action_copy_code()

    def action_copy_code(self) -> None:
        """Copy the fence-stripped code to the system clipboard."""
        try:
            pyperclip.copy(self._code)
        except pyperclip.PyperclipException as e:
            self.app.notify(f'Clipboard unavailable: {e}', severity='error', timeout=4)
            return
        self.app.notify('Copied to clipboard', timeout=2)
