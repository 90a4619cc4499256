"""Cache-aware forecast lookup for a location.

Serves the cached Pirate Weather payload while it is fresh, otherwise
fetches and caches a new one, then scores it. Upstream problems surface
as ForecastError carrying the HTTP status the API should answer with.

Usage::

    from tapping_time.services.forecast import ForecastError, get_forecast

    try:
        result = get_forecast(44.48, -73.21)
    except ForecastError as e:
        print(e.status, e.message)
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

import requests

from tapping_time.analysis.forecast import build_forecast_result
from tapping_time.config import Settings, get_settings
from tapping_time.datasources.weather import fetch_forecast
from tapping_time.store import DataStore, forecast_path

logger = logging.getLogger(__name__)

SOURCE = "pirateweather.net"


class ForecastError(Exception):
    """A forecast could not be produced; ``status`` is the HTTP status to report."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message


def default_store(settings: Settings | None = None) -> DataStore:
    """DataStore rooted at the configured data directory."""
    settings = settings or get_settings()
    return DataStore(Path(settings.data_dir))


def require_api_key(settings: Settings) -> str:
    """Return the Pirate Weather key, or raise ForecastError(500) when unset."""
    if not settings.pirate_weather_api_key:
        raise ForecastError(500, "API key not configured")
    return settings.pirate_weather_api_key


def read_cached_weather(store: DataStore, path: Path) -> dict[str, Any] | None:
    """Fresh cached payload at ``path``, or None on a miss.

    A file that no longer decodes (truncated by a killed writer, edited by
    hand) counts as a miss, so the next fetch overwrites it.
    """
    try:
        if not store.is_fresh(path):
            return None
        return store.read(path)
    except (ValueError, AttributeError) as e:  # bad JSON or timestamp, non-object envelope
        logger.warning("Ignoring unreadable forecast cache %s: %s", path, e)
        return None


def fetch_weather_payload(lat: float, lon: float, settings: Settings) -> dict[str, Any]:
    """Fetch a forecast payload, translating failures into ForecastError."""
    api_key = require_api_key(settings)

    try:
        return fetch_forecast(
            lat,
            lon,
            api_key,
            timeout=settings.forecast_timeout_seconds,
        )
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else "an error"
        logger.warning("Pirate Weather returned %s for (%s, %s)", status, lat, lon)
        raise ForecastError(502, f"Weather API returned {status}") from e
    except requests.RequestException as e:
        logger.warning("Pirate Weather unreachable for (%s, %s): %s", lat, lon, e)
        raise ForecastError(502, "Failed to reach weather API") from e


def save_weather_payload(
    store: DataStore,
    lat: float,
    lon: float,
    payload: dict[str, Any],
    settings: Settings,
) -> Path:
    """Cache a payload under the rounded-coordinate key."""
    return store.write(
        forecast_path(lat, lon),
        payload,
        source=SOURCE,
        valid_until=datetime.now(UTC) + timedelta(hours=settings.forecast_cache_hours),
        location={"lat": lat, "lon": lon},
    )


def load_or_fetch_weather(
    lat: float,
    lon: float,
    *,
    settings: Settings | None = None,
    store: DataStore | None = None,
) -> tuple[dict[str, Any], bool]:
    """Return ``(payload, cached)`` for a location.

    Raises:
        ForecastError: No fresh cache entry and the upstream fetch failed.
    """
    settings = settings or get_settings()
    store = store or default_store(settings)
    path = forecast_path(lat, lon)

    payload = read_cached_weather(store, path)
    if payload is not None:
        logger.debug("Forecast cache hit: %s", path)
        return payload, True

    logger.info("Fetching forecast for (%s, %s)", lat, lon)
    payload = fetch_weather_payload(lat, lon, settings)
    save_weather_payload(store, lat, lon, payload, settings)
    return payload, False


def get_forecast(
    lat: float,
    lon: float,
    *,
    settings: Settings | None = None,
    store: DataStore | None = None,
) -> dict[str, Any]:
    """Scored forecast for a location as a JSON-ready dict.

    Raises:
        ForecastError: The forecast could not be fetched.
    """
    payload, cached = load_or_fetch_weather(lat, lon, settings=settings, store=store)
    result = build_forecast_result(payload, lat, lon, cached=cached)
    return result.model_dump(mode="json")
