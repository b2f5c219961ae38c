"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ProxyConfig(BaseModel):
    model: str
    temperature: float
    seed: int
    max_tokens: int
    max_duration: float  # seconds; host-level ceiling on one request


class ComposerConfig(BaseModel):
    proxy_url: str
    max_images: int = Field(ge=1)
    request_timeout: float


class AppConfig(BaseModel):
    proxy: ProxyConfig
    composer: ComposerConfig
