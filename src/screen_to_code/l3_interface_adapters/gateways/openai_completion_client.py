"""Gateway: OpenAI-compatible completion client — implements CompletionClient port.

Works with any OpenAI-compatible API that accepts image_url content parts.
"""

from __future__ import annotations

import logging
from typing import Any

import openai

log = logging.getLogger('stc.llm')

PREFLIGHT_TIMEOUT = 5.0


class OpenAICompletionClient:
    """Wraps one shared openai.AsyncOpenAI to implement the CompletionClient protocol.

    The async client is created on first use and reused for every forward,
    so its connection pool lives as long as the server. ``aclose`` releases it.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = 'https://api.openai.com/v1',
        timeout: float | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._client: openai.AsyncOpenAI | None = None

    def _async_client(self) -> openai.AsyncOpenAI:
        if self._client is None:
            # max_retries=0: a failed forward is reported, never retried
            self._client = openai.AsyncOpenAI(
                api_key=self._api_key,
                base_url=self._base_url,
                timeout=self._timeout,
                max_retries=0,
            )
        return self._client

    async def complete(
        self,
        model: str,
        messages: list[dict[str, Any]],
        *,
        temperature: float,
        seed: int,
        max_tokens: int,
    ) -> dict[str, Any]:
        resp = await self._async_client().chat.completions.create(
            model=model,
            messages=messages,  # ty: ignore[invalid-argument-type] -- dict satisfies ChatCompletionMessageParam at runtime
            temperature=temperature,
            seed=seed,
            max_tokens=max_tokens,
        )
        return resp.model_dump()

    async def aclose(self) -> None:
        if self._client is not None:
            log.debug('Closing completion client for %s', self._base_url)
            await self._client.close()
            self._client = None

    def check_connectivity(self) -> tuple[bool, str]:
        try:
            with openai.OpenAI(
                api_key=self._api_key,
                base_url=self._base_url,
                timeout=PREFLIGHT_TIMEOUT,
                max_retries=0,
            ) as client:
                client.models.list()
            return True, ''
        except openai.AuthenticationError as e:
            return False, f'Authentication failed: {e}'
        except Exception as e:
            return False, f'Cannot connect to OpenAI-compatible API: {e}'
