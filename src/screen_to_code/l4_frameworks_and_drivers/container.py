"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from fastapi import FastAPI

from screen_to_code.l1_entities.config import AppConfig
from screen_to_code.l2_use_cases.forward_conversation_use_case import ForwardConversationUseCase
from screen_to_code.l2_use_cases.ports.completion_client import CompletionClient
from screen_to_code.l2_use_cases.ports.image_encoder import ImageEncoder
from screen_to_code.l2_use_cases.ports.proxy_client import ProxyClient
from screen_to_code.l2_use_cases.send_composition_use_case import SendCompositionUseCase
from screen_to_code.l3_interface_adapters.controllers.composer_controller import ComposerController
from screen_to_code.l3_interface_adapters.gateways.file_image_encoder import FileImageEncoder
from screen_to_code.l3_interface_adapters.gateways.httpx_proxy_client import HttpxProxyClient
from screen_to_code.l3_interface_adapters.gateways.openai_completion_client import OpenAICompletionClient
from screen_to_code.l4_frameworks_and_drivers.infra_config import ProxySettings
from screen_to_code.l4_frameworks_and_drivers.proxy_server import create_app


class ProxyContainer:
    """Wires the proxy side. Settings are resolved before construction, so a missing key never gets here."""

    def __init__(self, settings: ProxySettings, completion_client: CompletionClient | None = None) -> None:
        self.settings = settings
        self.completion_client: CompletionClient = completion_client or OpenAICompletionClient(
            api_key=settings.api_key,
            base_url=settings.base_url,
            timeout=settings.proxy.max_duration,
        )
        self.forward_uc = ForwardConversationUseCase(self.completion_client, settings.proxy)

    def build_app(self) -> FastAPI:
        return create_app(
            self.forward_uc,
            max_duration=self.settings.proxy.max_duration,
            on_shutdown=self.completion_client.aclose,
        )


class ComposerContainer:
    """Wires the Composer side. Easy to override for testing."""

    def __init__(
        self,
        config: AppConfig,
        proxy_client: ProxyClient | None = None,
        encoder: ImageEncoder | None = None,
    ) -> None:
        self.config = config
        self.proxy_client: ProxyClient = proxy_client or HttpxProxyClient(
            config.composer.proxy_url,
            timeout=config.composer.request_timeout,
        )
        self.encoder: ImageEncoder = encoder or FileImageEncoder()
        self.send_uc = SendCompositionUseCase(self.encoder, self.proxy_client)
        self.controller = ComposerController(self.send_uc, max_images=config.composer.max_images)
