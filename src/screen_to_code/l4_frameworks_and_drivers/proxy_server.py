"""FastAPI proxy — ``POST /api/openai`` validates, forwards and relays one conversation.

Run with: screen-to-code serve
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from screen_to_code.l1_entities.chat_message import ConversationResponse
from screen_to_code.l2_use_cases.forward_conversation_use_case import ForwardConversationUseCase

log = logging.getLogger('stc.proxy')

TIMEOUT_DETAIL = 'Request exceeded the maximum handling duration'


def create_app(
    forward_uc: ForwardConversationUseCase,
    max_duration: float = 30.0,
    on_shutdown: Callable[[], Awaitable[None]] | None = None,
) -> FastAPI:
    """Build the proxy app around an already-configured use case.

    *on_shutdown* runs once when the server stops, e.g. to close the completion client.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        if on_shutdown is not None:
            log.info('Shutting down proxy')
            await on_shutdown()

    app = FastAPI(title='screen-to-code proxy', lifespan=lifespan)

    @app.middleware('http')
    async def log_requests(request: Request, call_next):
        log.info('Request: %s %s', request.method, request.url.path)
        response = await call_next(request)
        log.info('Response status: %s', response.status_code)
        return response

    @app.post('/api/openai')
    async def openai_proxy(request: Request) -> JSONResponse:
        try:
            body = await request.json()
        except ValueError as e:
            log.error('Request body is not JSON: %s', e)
            return JSONResponse(ConversationResponse.forward_failed().to_payload())

        # overrunning max_duration is a host-level 504, never a ConversationResponse
        try:
            result = await asyncio.wait_for(forward_uc.execute(body), timeout=max_duration)
        except asyncio.TimeoutError:
            log.error('Handling exceeded %.1fs', max_duration)
            return JSONResponse({'detail': TIMEOUT_DETAIL}, status_code=504)
        return JSONResponse(result.to_payload())

    @app.get('/healthz')
    def healthz() -> dict[str, bool]:
        return {'ok': True}

    return app
