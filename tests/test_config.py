"""Tests for application settings."""

from __future__ import annotations

import pytest

from tapping_time.config import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PIRATE_WEATHER_API_KEY", raising=False)
        s = Settings(_env_file=None)
        assert s.app_name == "Tapping Time"
        assert s.pirate_weather_api_key == ""
        assert s.forecast_cache_hours == 3.0
        assert s.api_port == 8000

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PIRATE_WEATHER_API_KEY", "secret")
        monkeypatch.setenv("lat", "45.1")
        monkeypatch.setenv("FORECAST_CACHE_HOURS", "1.5")
        s = Settings(_env_file=None)
        assert s.pirate_weather_api_key == "secret"
        assert s.lat == 45.1
        assert s.forecast_cache_hours == 1.5

    def test_get_settings_cached(self) -> None:
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()
