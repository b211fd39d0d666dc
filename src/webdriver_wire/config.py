"""Configuration models for webdriver-wire."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import DEFAULT_BASE_URL


class ClientConfig(BaseSettings):
    """Settings for talking to a remote WebDriver server."""

    model_config = SettingsConfigDict(
        env_prefix="WEBDRIVER_WIRE_",
        env_file=(".env",),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    base_url: str = Field(default=DEFAULT_BASE_URL)
    timeout: Optional[float] = Field(
        default=60.0,
        description="Timeout (in seconds) passed to the HTTP transport; None disables it.",
    )
    verify_tls: bool = True
    browser: str = Field(default="firefox")
    desired_capabilities: dict[str, Any] = Field(default_factory=dict)


def load_config(
    path: Path | None = None,
    *,
    env_file: Path | None = None,
    **overrides: Any,
) -> ClientConfig:
    """Load configuration from an optional file and overrides."""

    data: dict[str, Any] = {}
    if path:
        import yaml

        data = yaml.safe_load(path.read_text()) or {}
    if overrides:
        _deep_update(data, overrides)
    settings_kwargs: dict[str, object] = {}
    if env_file is not None:
        settings_kwargs["_env_file"] = env_file
    config = ClientConfig(**data, **settings_kwargs)
    if not data:
        return config

    merged = config.model_dump(mode="python")
    _deep_update(merged, data)
    return ClientConfig.model_validate(merged)


def _deep_update(target: dict[str, Any], updates: dict[str, Any]) -> None:
    """Recursively merge ``updates`` into ``target`` in-place."""

    for key, value in updates.items():
        existing = target.get(key)
        if isinstance(value, dict) and isinstance(existing, dict):
            _deep_update(existing, value)
        else:
            target[key] = value
