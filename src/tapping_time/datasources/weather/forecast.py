"""Daily forecast and current conditions from Pirate Weather."""

from __future__ import annotations

from typing import Any

from tapping_time.datasources.weather.client import EXTEND, UNITS, forecast_url
from tapping_time.services.http import DEFAULT_TIMEOUT, session


def fetch_forecast(
    lat: float,
    lon: float,
    api_key: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
) -> dict[str, Any]:
    """
    Fetch the forecast for a location from Pirate Weather.

    Args:
        lat: Latitude.
        lon: Longitude.
        api_key: Pirate Weather API key.
        timeout: Request timeout in seconds.

    Returns:
        Raw API response dict with ``currently`` and ``daily.data`` keys.

    Raises:
        requests.HTTPError: Upstream answered with a non-2xx status.
        requests.RequestException: Upstream could not be reached.
    """
    params = {"units": UNITS, "extend": EXTEND}
    resp = session.get(forecast_url(api_key, lat, lon), params=params, timeout=timeout)
    resp.raise_for_status()
    result: dict[str, Any] = resp.json()
    return result
