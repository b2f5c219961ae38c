"""Use case: encode staged images and post the screenshot-to-code request to the proxy."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from screen_to_code.l1_entities.chat_message import ConversationResponse
from screen_to_code.l2_use_cases.ports.image_encoder import ImageEncoder
from screen_to_code.l2_use_cases.ports.proxy_client import ProxyClient
from screen_to_code.l2_use_cases.utils.prompt_builder import TAILWIND_PROMPT, build_conversation_request

log = logging.getLogger('stc.composer')


class SendCompositionUseCase:
    """Converts every image concurrently, then issues a single request. Raises on any failure."""

    def __init__(self, encoder: ImageEncoder, proxy_client: ProxyClient, prompt: str = TAILWIND_PROMPT) -> None:
        self._encoder = encoder
        self._proxy = proxy_client
        self._prompt = prompt

    async def execute(self, images: Sequence[Path]) -> ConversationResponse:
        # all-or-nothing: gather propagates the first conversion failure
        data_urls = await asyncio.gather(*(self._encoder.to_data_url(p) for p in images))
        request = build_conversation_request(data_urls, prompt=self._prompt)
        log.info('Posting conversation with %d image(s)', len(data_urls))
        return await self._proxy.post_conversation(request)
