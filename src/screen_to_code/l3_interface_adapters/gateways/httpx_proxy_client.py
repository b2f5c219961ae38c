"""Gateway: HTTP client for the local proxy endpoint — implements ProxyClient port."""

from __future__ import annotations

import httpx

from screen_to_code.l1_entities.chat_message import ConversationRequest, ConversationResponse
from screen_to_code.l1_entities.errors import ProxyRequestError


class HttpxProxyClient:
    """Posts ConversationRequest JSON to ``POST /api/openai`` and parses the reply."""

    def __init__(
        self,
        proxy_url: str,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._proxy_url = proxy_url
        self._timeout = timeout
        self._transport = transport

    async def post_conversation(self, request: ConversationRequest) -> ConversationResponse:
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                resp = await client.post(self._proxy_url, json=request.model_dump(mode='json'))
                resp.raise_for_status()
                return ConversationResponse.model_validate(resp.json())
        except httpx.HTTPError as e:
            raise ProxyRequestError(f'Proxy request failed: {e}') from e
        except ValueError as e:  # JSON decode errors and pydantic ValidationError
            raise ProxyRequestError(f'Proxy returned an unusable body: {e}') from e
