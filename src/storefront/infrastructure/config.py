"""Process configuration, read from the environment and an optional .env."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the storefront service.

    Every field can be overridden with a ``STOREFRONT_``-prefixed
    environment variable, e.g. ``STOREFRONT_STORAGE_BACKEND=json``.
    """

    app_name: str = "Storefront"
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"

    # Mounted in front of every route, e.g. "/api".
    api_prefix: str = ""

    storage_backend: Literal["memory", "json"] = "memory"
    data_dir: Path = Field(default=Path("./data"))

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        extra="ignore",
    )
