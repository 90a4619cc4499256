"""
Prefect flow for fetching the forecast for the configured location.

Skips the fetch while the cached forecast is still fresh (3 hours by
default).

Run locally:
    PIRATE_WEATHER_API_KEY=... python -m tapping_time.flows.fetch
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from prefect import flow, task

from tapping_time.config import get_settings
from tapping_time.services import forecast as forecast_service
from tapping_time.store import DataStore, forecast_path

# Data store rooted at the configured data directory
store = DataStore(Path(get_settings().data_dir))


@task(name="fetch-weather", retries=2, retry_delay_seconds=5)
def fetch_weather(lat: float, lon: float) -> dict[str, Any]:
    """Fetch the Pirate Weather forecast."""
    return forecast_service.fetch_weather_payload(lat, lon, get_settings())


@task(name="save-weather")
def save_weather(lat: float, lon: float, weather: dict[str, Any]) -> Path:
    """Cache the forecast payload under its rounded-coordinate key."""
    return forecast_service.save_weather_payload(store, lat, lon, weather, get_settings())


@flow(name="fetch-forecast", log_prints=True)
def fetch_all(lat: float | None = None, lon: float | None = None) -> dict[str, Any]:
    """
    Fetch the forecast for a location (default: configured location).

    Checks freshness before fetching.
    """
    settings = get_settings()
    lat = settings.lat if lat is None else lat
    lon = settings.lon if lon is None else lon
    path = forecast_path(lat, lon)

    cached_weather = forecast_service.read_cached_weather(store, path)
    if cached_weather is not None:
        print("Forecast is fresh, skipping fetch.")
        weather = cached_weather
        cached = True
    else:
        # Checked outside the retrying task
        forecast_service.require_api_key(settings)
        print(f"Fetching forecast for ({lat}, {lon})...")
        weather = fetch_weather(lat, lon)
        output_path = save_weather(lat, lon, weather)
        print(f"Saved forecast to {output_path}")
        cached = False

    days = len((weather.get("daily") or {}).get("data") or [])
    return {"forecast_days": days, "cached": cached, "path": str(store.base / path)}


if __name__ == "__main__":
    result = fetch_all()
    print(f"Flow complete: {result}")
