"""ComposerController — owns Composer state and runs the send pipeline for the TUI."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from screen_to_code.l1_entities.chat_message import ImagePart, TextPart
from screen_to_code.l1_entities.chat_turn import ChatTurn, Parts
from screen_to_code.l1_entities.staged_images import DEFAULT_MAX_IMAGES, StagedImages
from screen_to_code.l2_use_cases.send_composition_use_case import SendCompositionUseCase

log = logging.getLogger('stc.controller')

SEND_FAILED = 'Failed to send message'


@dataclass(frozen=True)
class SendOutcome:
    """Result of one send — either an assistant turn or an error for a notification."""

    turn: ChatTurn | None = None
    error: str = ''
    skipped: bool = False

    @property
    def ok(self) -> bool:
        return self.turn is not None


class ComposerController:
    """Central orchestrator bridging the send use case to the TUI.

    Owns the staged text and images, the in-memory conversation and the
    in-flight flag. The App (L4) delegates every state change to this controller.
    """

    def __init__(self, send_uc: SendCompositionUseCase, max_images: int = DEFAULT_MAX_IMAGES) -> None:
        self._send_uc = send_uc
        self.staged = StagedImages(max_images=max_images)
        self.turns: list[ChatTurn] = []
        self.text: str = ''
        self.is_sending = False

    def attach_images(self, files: Iterable[Path | str]) -> int:
        """Stage images up to capacity. Returns how many were accepted."""
        if self.is_sending:
            return 0
        return self.staged.attach(files)

    def remove_image(self, index: int) -> bool:
        if self.is_sending:
            return False
        return self.staged.remove(index)

    def _optimistic_turn(self) -> ChatTurn:
        parts: list[TextPart | ImagePart] = [TextPart(text=self.text)]
        parts.extend(ImagePart.from_url(p.resolve().as_uri()) for p in self.staged.paths)
        return ChatTurn(role='user', content=Parts(tuple(parts)))

    def begin_send(self) -> ChatTurn | None:
        """Mark the send in flight and append the local user turn. None if already sending."""
        if self.is_sending:
            return None
        self.is_sending = True
        turn = self._optimistic_turn()
        self.turns.append(turn)
        return turn

    async def finish_send(self) -> SendOutcome:
        """Run the pipeline for the staged images. Always resets staged state and the flag."""
        try:
            response = await self._send_uc.execute(list(self.staged.paths))
            if not response.success or response.message is None:
                log.warning('Proxy reported failure: %s', response.error)
                return SendOutcome(error=response.error or SEND_FAILED)
            turn = ChatTurn.from_message(response.message)
            self.turns.append(turn)
            return SendOutcome(turn=turn)
        except Exception as e:
            log.error('Send failed: %s', e, exc_info=True)
            return SendOutcome(error=SEND_FAILED)
        finally:
            self.text = ''
            self.staged.clear()
            self.is_sending = False

    async def send(self) -> SendOutcome:
        if self.begin_send() is None:
            return SendOutcome(skipped=True)
        return await self.finish_send()
