"""Port: Composer-side client for the local proxy endpoint."""

from __future__ import annotations

from typing import Protocol

from screen_to_code.l1_entities.chat_message import ConversationRequest, ConversationResponse


class ProxyClient(Protocol):
    """Posts a conversation to the proxy. Raises ProxyRequestError on transport failure."""

    async def post_conversation(self, request: ConversationRequest) -> ConversationResponse: ...
