"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from screen_to_code.l1_entities.chat_message import ConversationRequest, ConversationResponse
from screen_to_code.l1_entities.config import AppConfig
from screen_to_code.l1_entities.errors import ImageConversionError, ProxyRequestError
from screen_to_code.l2_use_cases.send_composition_use_case import SendCompositionUseCase
from screen_to_code.l3_interface_adapters.controllers.composer_controller import ComposerController
from screen_to_code.l4_frameworks_and_drivers.infra_config import build_app_config

# --- Protocol-conforming Fakes ---


def completion_body(content: Any = '<html></html>', role: str = 'assistant') -> dict[str, Any]:
    """Minimal chat-completion body with one choice."""
    return {
        'id': 'chatcmpl-test',
        'object': 'chat.completion',
        'choices': [{'index': 0, 'message': {'role': role, 'content': content}, 'finish_reason': 'stop'}],
    }


class FakeCompletionClient:
    """Fake completion API for L2 use case and proxy route tests."""

    def __init__(self, body: dict[str, Any] | None = None) -> None:
        self._body = body if body is not None else completion_body()
        self._error: Exception | None = None
        self.calls: list[dict[str, Any]] = []
        self._connectivity = (True, '')
        self.closed = False

    async def complete(
        self,
        model: str,
        messages: list[dict[str, Any]],
        *,
        temperature: float,
        seed: int,
        max_tokens: int,
    ) -> dict[str, Any]:
        self.calls.append(
            {
                'model': model,
                'messages': messages,
                'temperature': temperature,
                'seed': seed,
                'max_tokens': max_tokens,
            }
        )
        if self._error is not None:
            raise self._error
        return self._body

    def check_connectivity(self) -> tuple[bool, str]:
        return self._connectivity

    async def aclose(self) -> None:
        self.closed = True

    def set_body(self, body: dict[str, Any]) -> None:
        self._body = body

    def set_error(self, error: Exception) -> None:
        self._error = error

    def set_connectivity(self, ok: bool, msg: str = '') -> None:
        self._connectivity = (ok, msg)


class FakeProxyClient:
    """Fake proxy endpoint for Composer-side tests."""

    def __init__(self, response: ConversationResponse | None = None) -> None:
        self._response = response or ConversationResponse.ok({'role': 'assistant', 'content': '<html></html>'})
        self._error: Exception | None = None
        self.requests: list[ConversationRequest] = []

    async def post_conversation(self, request: ConversationRequest) -> ConversationResponse:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        return self._response

    def set_response(self, response: ConversationResponse) -> None:
        self._response = response

    def fail_with(self, error: Exception | None = None) -> None:
        self._error = error or ProxyRequestError('connection refused')


class FakeImageEncoder:
    """Fake image encoder: deterministic data URLs, optional per-path failures."""

    def __init__(self, failing: set[str] | None = None) -> None:
        self._failing = failing or set()
        self.calls: list[Path] = []

    async def to_data_url(self, path: Path) -> str:
        self.calls.append(Path(path))
        if Path(path).name in self._failing:
            raise ImageConversionError(f'cannot read {path}')
        return f'data:image/png;base64,{Path(path).stem}'


# --- Standard Fixtures ---


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({})


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = """\
proxy:
  model: "gpt-4o"
  max_tokens: 2048
  max_duration: 12.5
composer:
  proxy_url: "http://localhost:9000/api/openai"
  max_images: 3
openai:
  api_key: "sk-from-yaml"
  base_url: "https://api.example.com/v1"
server:
  port: 9000
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p


@pytest.fixture
def fake_completion() -> FakeCompletionClient:
    return FakeCompletionClient()


@pytest.fixture
def fake_proxy() -> FakeProxyClient:
    return FakeProxyClient()


@pytest.fixture
def fake_encoder() -> FakeImageEncoder:
    return FakeImageEncoder()


@pytest.fixture
def controller(fake_proxy: FakeProxyClient, fake_encoder: FakeImageEncoder) -> ComposerController:
    return ComposerController(SendCompositionUseCase(fake_encoder, fake_proxy))


@pytest.fixture
def image_files(tmp_path: Path) -> list[Path]:
    """Seven tiny files on disk; more than the default capacity."""
    files = []
    for i in range(7):
        p = tmp_path / f'shot{i}.png'
        p.write_bytes(b'\x89PNG\r\n\x1a\n' + bytes([i]))
        files.append(p)
    return files
