"""Application configuration using Pydantic settings.

Values come from environment variables (case-insensitive) or a ``.env``
file in the working directory.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "Tapping Time"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Default location for the static site (Burlington, VT)
    lat: float = 44.48
    lon: float = -73.21

    api_port: int = 8000
    data_dir: str = "data"

    # Pirate Weather (https://pirateweather.net/)
    pirate_weather_api_key: str = ""
    forecast_cache_hours: float = 3.0
    forecast_timeout_seconds: float = 30.0


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
