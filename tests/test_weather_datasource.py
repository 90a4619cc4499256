"""Tests for the Pirate Weather datasource."""

from __future__ import annotations

from unittest.mock import Mock, patch

import pytest
import requests

from tapping_time.datasources.weather import PIRATE_WEATHER_API, fetch_forecast, forecast_url


class TestForecastUrl:
    def test_url_layout(self) -> None:
        assert forecast_url("abc", 44.48, -73.21) == f"{PIRATE_WEATHER_API}/abc/44.48,-73.21"


class TestFetchForecast:
    """Test the raw fetch."""

    @patch("tapping_time.datasources.weather.forecast.session.get")
    def test_returns_json(self, mock_get: Mock) -> None:
        mock_response = Mock()
        mock_response.json.return_value = {"daily": {"data": []}}
        mock_response.raise_for_status = Mock()
        mock_get.return_value = mock_response

        result = fetch_forecast(44.48, -73.21, "abc", timeout=5)

        assert result == {"daily": {"data": []}}
        call_kwargs = mock_get.call_args.kwargs
        assert call_kwargs["params"]["units"] == "si"
        assert call_kwargs["timeout"] == 5

    @patch("tapping_time.datasources.weather.forecast.session.get")
    def test_http_error_propagates(self, mock_get: Mock) -> None:
        mock_response = Mock()
        mock_response.raise_for_status.side_effect = requests.HTTPError("403")
        mock_get.return_value = mock_response

        with pytest.raises(requests.HTTPError):
            fetch_forecast(44.48, -73.21, "bad")
