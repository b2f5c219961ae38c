"""Use case: validate a conversation, forward it to the completion API, relay the first reply."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from screen_to_code.l1_entities.chat_message import ConversationRequest, ConversationResponse, Role
from screen_to_code.l1_entities.config import ProxyConfig
from screen_to_code.l1_entities.errors import ProviderResponseError
from screen_to_code.l2_use_cases.ports.completion_client import CompletionClient
from screen_to_code.l2_use_cases.utils.prompt_builder import normalize_messages

log = logging.getLogger('stc.proxy')


class _ProviderMessage(BaseModel):
    model_config = ConfigDict(extra='allow')

    role: Role
    content: Any = None


class _ProviderChoice(BaseModel):
    model_config = ConfigDict(extra='allow')

    message: _ProviderMessage


class _ProviderCompletion(BaseModel):
    model_config = ConfigDict(extra='allow')

    choices: list[_ProviderChoice] = Field(min_length=1)


def first_choice_message(body: Any) -> dict[str, Any]:
    """Return ``choices[0].message`` from a provider body, or raise ProviderResponseError."""
    try:
        completion = _ProviderCompletion.model_validate(body)
    except ValidationError as e:
        raise ProviderResponseError(f'Malformed completion response: {e.error_count()} error(s)') from e
    return completion.choices[0].message.model_dump()


class ForwardConversationUseCase:
    """Stateless: one call validates, forwards once and answers with the disjoint response shape."""

    def __init__(self, client: CompletionClient, config: ProxyConfig) -> None:
        self._client = client
        self._config = config

    async def execute(self, body: Any) -> ConversationResponse:
        """Never raises for validation or forwarding failures."""
        try:
            request = ConversationRequest.model_validate(body)
        except ValidationError as e:
            log.warning('Invalid schema: %s', e)
            return ConversationResponse.invalid_schema()

        messages = normalize_messages(request.messages)
        log.info(
            'Forwarding %d message(s), %d part(s) to %s',
            len(messages),
            sum(len(m['content']) for m in messages),
            self._config.model,
        )

        try:
            raw = await self._client.complete(
                self._config.model,
                messages,
                temperature=self._config.temperature,
                seed=self._config.seed,
                max_tokens=self._config.max_tokens,
            )
            message = first_choice_message(raw)
        except Exception as e:
            log.error('Forwarding failed: %s', e, exc_info=True)
            return ConversationResponse.forward_failed()

        return ConversationResponse.ok(message)
