"""Conversation panel — scrollable list of rendered chat turns."""

from __future__ import annotations

from pathlib import PurePosixPath
from urllib.parse import unquote, urlsplit

from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.widgets import Static

from screen_to_code.l1_entities.chat_message import ImagePart, TextPart
from screen_to_code.l1_entities.chat_turn import ChatTurn, Parts, RawText
from screen_to_code.l4_frameworks_and_drivers.widgets.code_reply_view import CodeReplyView

_MAX_URL_LABEL = 48


def image_label(url: str) -> str:
    """Short thumbnail caption: file name, data URL mime type and size, or a truncated URL."""
    parts = urlsplit(url)
    if parts.scheme == 'file':
        return PurePosixPath(unquote(parts.path)).name or url
    if parts.scheme == 'data':
        header, _, payload = parts.path.partition(',')
        mime = header.split(';')[0] or 'data'
        size_kb = len(payload) * 3 // 4 // 1024
        return f'{mime} ({size_kb} KB)'
    if len(url) > _MAX_URL_LABEL:
        return url[: _MAX_URL_LABEL - 1] + '…'
    return url


class TurnView(Vertical):
    """One conversation entry. Parts render part by part; RawText renders the code control."""

    DEFAULT_CSS = """
    TurnView {
        height: auto;
        margin-bottom: 1;
        padding: 0 1;
    }
    TurnView.user {
        border-left: thick $accent;
    }
    TurnView.assistant {
        border-left: thick $success;
    }
    TurnView > .turn-image {
        color: $text-muted;
    }
    """

    def __init__(self, turn: ChatTurn, **kwargs) -> None:
        super().__init__(classes=turn.role, **kwargs)
        self.turn = turn

    def compose(self) -> ComposeResult:
        content = self.turn.content
        if isinstance(content, RawText):
            yield CodeReplyView(content.text)
        else:
            yield from self._compose_parts(content)

    def _compose_parts(self, content: Parts) -> ComposeResult:
        for part in content.parts:
            if isinstance(part, TextPart):
                if part.text:
                    yield Static(part.text, classes='turn-text', markup=False)
            elif isinstance(part, ImagePart):
                yield Static(f'[img] {image_label(part.image_url.url)}', classes='turn-image', markup=False)


class ConversationPanel(VerticalScroll):
    """Scrollable conversation. Holds no state beyond the mounted turn views."""

    DEFAULT_CSS = """
    ConversationPanel {
        height: 1fr;
        border: solid $secondary;
        scrollbar-size: 1 1;
    }
    ConversationPanel:focus {
        border: solid $accent;
    }
    """

    def __init__(self, title: str = 'Conversation', **kwargs) -> None:
        super().__init__(**kwargs)
        self.border_title = title

    def append_turn(self, turn: ChatTurn) -> TurnView:
        view = TurnView(turn)
        self.mount(view)
        self.call_after_refresh(self.scroll_end, animate=False)
        return view
