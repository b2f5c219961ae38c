"""Configuration loading: YAML discovery, defaults merge and provider settings. Lives in L4, not domain."""

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from screen_to_code.l1_entities.config import AppConfig, ProxyConfig
from screen_to_code.l1_entities.errors import MissingApiKeyError
from screen_to_code.l3_interface_adapters.gateways.paths import DEFAULT_CONFIG_PATHS

log = logging.getLogger('stc.config')

APP_CONFIG_DEFAULTS: dict = {
    'proxy': {
        'model': 'gpt-4-vision-preview',
        'temperature': 0,
        'seed': 0,
        'max_tokens': 4000,
        'max_duration': 30.0,
    },
    'composer': {
        'proxy_url': 'http://127.0.0.1:3000/api/openai',
        'max_images': 5,
        'request_timeout': 60.0,
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)


class OpenAIProviderConfig(BaseModel):
    api_key: str | None = None  # None → OPENAI_API_KEY env
    base_url: str = 'https://api.openai.com/v1'


class ServerConfig(BaseModel):
    host: str = '127.0.0.1'
    port: int = 3000


class InfraConfig(BaseModel):
    """Groups all provider-specific settings outside the domain layer."""

    openai: OpenAIProviderConfig = Field(default_factory=OpenAIProviderConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)


class ProxySettings(BaseModel):
    """Resolved proxy settings. Built once at startup and passed to the proxy explicitly."""

    api_key: str = Field(min_length=1)
    base_url: str
    proxy: ProxyConfig

    @classmethod
    def from_infra(cls, infra: InfraConfig, config: AppConfig) -> ProxySettings:
        """Resolve the API key from config, then OPENAI_API_KEY. Fails fast when absent."""
        api_key = infra.openai.api_key or os.environ.get('OPENAI_API_KEY', '')
        if not api_key.strip():
            raise MissingApiKeyError('No provider API key: set openai.api_key in config or OPENAI_API_KEY')
        return cls(api_key=api_key.strip(), base_url=infra.openai.base_url, proxy=config.proxy)


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def _find_config_file(config_path: str | None) -> Path | None:
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f'Config file not found: {path}')
        return path
    return next((p for p in DEFAULT_CONFIG_PATHS if p.exists()), None)


def load_configs(
    config_path: str | None = None,
    overrides: dict | None = None,
) -> tuple[AppConfig, InfraConfig]:
    """Read the YAML config (explicit path, else the first default that exists), apply
    *overrides*, and validate it into the app config and the provider settings.

    Raises FileNotFoundError when an explicit *config_path* does not exist.
    """
    raw: dict = {}
    path = _find_config_file(config_path)
    if path is not None:
        log.info('Loading config from %s', path)
        raw = yaml.safe_load(path.read_text(encoding='utf-8')) or {}
    if overrides:
        deep_merge(raw, overrides)
    return build_app_config(raw), InfraConfig.model_validate(raw)
