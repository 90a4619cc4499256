"""Tests for turning Pirate Weather payloads into scored results."""

from __future__ import annotations

from datetime import date

from tapping_time.analysis.forecast import (
    build_forecast_result,
    parse_current_conditions,
    parse_forecast_days,
)
from tapping_time.scoring import Rating, RecommendationType

# Local midnight at UTC-5 for 2026-03-02 .. 2026-03-05
MAR_2, MAR_3, MAR_4, MAR_5 = 1772427600, 1772514000, 1772600400, 1772686800


def make_payload(daily: list[dict[str, object]], offset: float = -5) -> dict[str, object]:
    return {
        "offset": offset,
        "currently": {"temperature": 1.5, "summary": "Clear", "icon": "clear-day"},
        "daily": {"data": daily},
    }


SAMPLE_PAYLOAD = make_payload(
    [
        {"time": MAR_2, "temperatureHigh": 6.0, "temperatureLow": -4.0, "icon": "clear-day"},
        {"time": MAR_3, "temperatureHigh": 7.0, "temperatureLow": -5.0, "summary": "Sunny"},
        {"time": MAR_4, "temperatureHigh": 8.0, "temperatureLow": -3.0},
        {"time": MAR_5, "temperatureHigh": 12.0, "temperatureLow": 4.0, "icon": "rain"},
    ]
)


class TestParseForecastDays:
    """Mapping upstream daily entries to ForecastDays."""

    def test_dates_use_offset(self) -> None:
        days = parse_forecast_days(SAMPLE_PAYLOAD)
        assert [d.date for d in days] == ["2026-03-02", "2026-03-03", "2026-03-04", "2026-03-05"]

    def test_dates_without_offset_use_utc(self) -> None:
        days = parse_forecast_days({"daily": {"data": [{"time": MAR_2, "temperatureHigh": 1}]}})
        assert days[0].date == "2026-03-02"

    def test_ratings(self) -> None:
        days = parse_forecast_days(SAMPLE_PAYLOAD)
        assert [d.rating for d in days] == [
            Rating.EXCELLENT,
            Rating.EXCELLENT,
            Rating.EXCELLENT,
            Rating.POOR,
        ]
        assert [d.score for d in days] == [3, 3, 3, 0]

    def test_summary_and_icon(self) -> None:
        days = parse_forecast_days(SAMPLE_PAYLOAD)
        assert days[0].icon == "clear-day"
        assert days[1].summary == "Sunny"
        assert days[2].summary == ""

    def test_falls_back_to_max_min(self) -> None:
        payload = make_payload([{"time": MAR_2, "temperatureMax": 6.0, "temperatureMin": -4.0}])
        day = parse_forecast_days(payload)[0]
        assert (day.temp_low, day.temp_high) == (-4.0, 6.0)
        assert day.rating == Rating.EXCELLENT

    def test_missing_temperature_is_unknown(self) -> None:
        payload = make_payload([{"time": MAR_2, "temperatureHigh": 6.0}])
        day = parse_forecast_days(payload)[0]
        assert day.rating == Rating.UNKNOWN
        assert day.score == 0
        assert day.temp_high == 6.0
        assert day.temp_low is None

    def test_empty_payloads(self) -> None:
        assert parse_forecast_days(None) == []
        assert parse_forecast_days({}) == []
        assert parse_forecast_days({"daily": {}}) == []


class TestParseCurrentConditions:
    """Extracting current conditions."""

    def test_current(self) -> None:
        current = parse_current_conditions(SAMPLE_PAYLOAD)
        assert current.temperature == 1.5
        assert current.summary == "Clear"
        assert current.icon == "clear-day"

    def test_missing_currently(self) -> None:
        current = parse_current_conditions({})
        assert current.temperature is None
        assert current.summary == ""


class TestBuildForecastResult:
    """End-to-end scoring of a payload."""

    def test_tap_now(self) -> None:
        result = build_forecast_result(SAMPLE_PAYLOAD, 44.5, -73.2, today=date(2026, 3, 2))
        assert result.recommendation.type == RecommendationType.TAP_NOW
        assert result.best_window is not None
        assert result.best_window.start_date == "2026-03-02"
        assert result.best_window.end_date == "2026-03-04"
        assert result.best_window.length == 3
        assert result.best_window.avg_score == 3.0
        assert result.today is not None
        assert result.today.date == "2026-03-02"
        assert result.cached is False

    def test_season_for_latitude_and_year(self) -> None:
        result = build_forecast_result(SAMPLE_PAYLOAD, 45.0, -73.2, today=date(2026, 3, 2))
        assert result.season is not None
        assert result.season.tap_by_date == "2026-03-17"

    def test_no_data(self) -> None:
        result = build_forecast_result(None, 44.5, -73.2, today=date(2026, 3, 2))
        assert result.days == []
        assert result.today is None
        assert result.best_window is None
        assert result.recommendation.type == RecommendationType.NO_WINDOW

    def test_json_dump(self) -> None:
        result = build_forecast_result(
            SAMPLE_PAYLOAD, 44.5, -73.2, today=date(2026, 3, 2), cached=True
        )
        data = result.model_dump(mode="json")
        assert data["cached"] is True
        assert data["recommendation"]["type"] == "tap_now"
        assert data["days"][0]["rating"] == "excellent"
        assert data["days"][0]["temp_low"] == -4.0
        assert data["best_window"]["length"] == 3
        assert data["season"]["season_end_date"] == "2026-03-28"
