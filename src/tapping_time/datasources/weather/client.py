"""Pirate Weather API constants.

API docs: https://docs.pirateweather.net/en/latest/API/
"""

from __future__ import annotations

PIRATE_WEATHER_API = "https://api.pirateweather.net/forecast"

# SI units give temperatures in Celsius
UNITS = "si"
EXTEND = "hourly"


def forecast_url(api_key: str, lat: float, lon: float) -> str:
    """Forecast endpoint for a key and coordinate pair."""
    return f"{PIRATE_WEATHER_API}/{api_key}/{lat},{lon}"
