"""
Application settings.

Runtime knobs only. The location and refresh interval are fixed constants
(see ``datasources/weather/client.py``) and deliberately not configurable.

Values come from ``LAKMETEO_*`` environment variables or a local ``.env``.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for the CLI, server and logging."""

    model_config = SettingsConfigDict(
        env_prefix="LAKMETEO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "LakMeteo"
    app_env: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"
    api_port: int = Field(default=8000, ge=1, le=65535)
    request_timeout: float = Field(default=30.0, gt=0)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (read once)."""
    return Settings()
