"""Chat message entities — the conversation contract between Composer and Proxy."""

from __future__ import annotations

from typing import Annotated, Any, Literal
from urllib.parse import urlsplit

from pydantic import BaseModel, Field, field_validator

Role = Literal['user', 'assistant', 'system']

_NETWORK_SCHEMES = {'http', 'https'}


def is_well_formed_url(url: str) -> bool:
    """Syntactic check only: data URLs, http(s) URLs with a host, and local file URLs."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    scheme = parts.scheme.lower()
    if scheme == 'data':
        return ',' in parts.path
    if scheme in _NETWORK_SCHEMES:
        return bool(parts.netloc)
    if scheme == 'file':
        return bool(parts.path)
    return False


class TextPart(BaseModel):
    type: Literal['text'] = 'text'
    text: str


class ImageUrl(BaseModel):
    url: str

    @field_validator('url')
    @classmethod
    def _check_url(cls, value: str) -> str:
        if not is_well_formed_url(value):
            raise ValueError('url is not a valid URL')
        return value


class ImagePart(BaseModel):
    type: Literal['image_url'] = 'image_url'
    image_url: ImageUrl

    @classmethod
    def from_url(cls, url: str) -> ImagePart:
        return cls(image_url=ImageUrl(url=url))


ContentPart = Annotated[TextPart | ImagePart, Field(discriminator='type')]


class Message(BaseModel):
    """A single message in a conversation request."""

    role: Role
    content: list[ContentPart]


class ConversationRequest(BaseModel):
    """The unit the Composer sends to the Proxy."""

    messages: list[Message]


class ConversationResponse(BaseModel):
    """Proxy reply. Serialize with ``to_payload`` so each case keeps only its own keys."""

    success: bool
    message: dict[str, Any] | None = None
    error: str | None = None

    @classmethod
    def invalid_schema(cls) -> ConversationResponse:
        return cls(success=False, error='Invalid schema')

    @classmethod
    def forward_failed(cls) -> ConversationResponse:
        return cls(success=False, message=None)

    @classmethod
    def ok(cls, message: dict[str, Any]) -> ConversationResponse:
        return cls(success=True, message=message)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)
