"""Tests for application settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from lakmeteo.config import Settings, get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Settings defaults and environment overrides."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LAKMETEO_API_PORT", raising=False)
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.app_name == "LakMeteo"
        assert settings.api_port == 8000
        assert settings.log_level == "INFO"
        assert settings.debug is False

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LAKMETEO_API_PORT", "9000")
        monkeypatch.setenv("LAKMETEO_DEBUG", "true")
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.api_port == 9000
        assert settings.debug is True

    def test_invalid_port_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LAKMETEO_API_PORT", "70000")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)  # type: ignore[call-arg]

    def test_no_location_settings(self) -> None:
        """Location is fixed, not configurable."""
        assert "lat" not in Settings.model_fields
        assert "lon" not in Settings.model_fields

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()
