"""Rendered conversation entries and the Parts/RawText content variant."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from pydantic import TypeAdapter, ValidationError

from screen_to_code.l1_entities.chat_message import ContentPart, Role

_PARTS_ADAPTER: TypeAdapter[list[ContentPart]] = TypeAdapter(list[ContentPart])


@dataclass(frozen=True)
class Parts:
    """Content made of typed text/image parts."""

    parts: tuple[ContentPart, ...]


@dataclass(frozen=True)
class RawText:
    """Content that is a single opaque string — the generated-code reply shape."""

    text: str


Content = Parts | RawText


def to_content(raw: Any) -> Content:
    """Resolve a wire ``content`` value into the explicit variant, once."""
    if raw is None:
        return RawText('')
    if isinstance(raw, str):
        return RawText(raw)
    if isinstance(raw, list):
        try:
            return Parts(tuple(_PARTS_ADAPTER.validate_python(raw)))
        except ValidationError:
            return RawText(json.dumps(raw, ensure_ascii=False))
    return RawText(str(raw))


@dataclass(frozen=True)
class ChatTurn:
    """One entry of the visible conversation. Held in memory only."""

    role: Role
    content: Content

    @classmethod
    def from_message(cls, message: dict[str, Any]) -> ChatTurn:
        role = message.get('role', 'assistant')
        if role not in ('user', 'assistant', 'system'):
            role = 'assistant'
        return cls(role=role, content=to_content(message.get('content')))
