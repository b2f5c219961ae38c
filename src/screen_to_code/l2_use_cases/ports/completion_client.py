"""Port: external completion API client."""

from __future__ import annotations

from typing import Any, Protocol


class CompletionClient(Protocol):
    """Abstract chat-completion provider. Returns the raw response body as a dict."""

    async def complete(
        self,
        model: str,
        messages: list[dict[str, Any]],
        *,
        temperature: float,
        seed: int,
        max_tokens: int,
    ) -> dict[str, Any]:
        """Single forward. Raises on transport or provider failure."""
        ...

    def check_connectivity(self) -> tuple[bool, str]:
        """Pre-flight connectivity check. Returns (ok, error_message)."""
        ...

    async def aclose(self) -> None:
        """Release pooled connections. Called once at server shutdown."""
        ...
