"""Textual Message subclasses — contracts between widgets/workers and the App."""

from __future__ import annotations

from textual.message import Message

from screen_to_code.l3_interface_adapters.controllers.composer_controller import SendOutcome


class SendFinished(Message):
    """Posted by the send worker once the pipeline has run and state is reset."""

    def __init__(self, outcome: SendOutcome) -> None:
        super().__init__()
        self.outcome = outcome


class RemoveImageRequested(Message):
    """Posted by the staged image row when a remove button is pressed."""

    def __init__(self, index: int) -> None:
        super().__init__()
        self.index = index
