"""Pirate Weather forecast data source.

Fetches current conditions and the daily forecast from Pirate Weather
(Dark Sky compatible, API key required).

Public API:
  - forecast: fetch_forecast
  - client: API URL, shared constants
"""

from tapping_time.datasources.weather.client import PIRATE_WEATHER_API, forecast_url
from tapping_time.datasources.weather.forecast import fetch_forecast

__all__ = [
    "PIRATE_WEATHER_API",
    "fetch_forecast",
    "forecast_url",
]
