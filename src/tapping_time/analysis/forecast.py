"""Score a Pirate Weather forecast and bundle the result.

Maps the upstream ``daily.data`` entries onto rated ForecastDays, runs the
window finder and recommendation generator, and adds typical season
timing for the latitude.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone
from typing import Any

from tapping_time.schemas import (
    CurrentConditions,
    ForecastResult,
    Location,
    RecommendationOut,
    WindowSummary,
)
from tapping_time.scoring import (
    ForecastDay,
    find_best_window,
    generate_recommendation,
    get_season_info,
    score_day,
)


def _first_present(entry: dict[str, Any], *keys: str) -> float | None:
    for key in keys:
        value = entry.get(key)
        if value is not None:
            return float(value)
    return None


def _local_date(timestamp: float, tz: timezone) -> str:
    return datetime.fromtimestamp(timestamp, tz=tz).date().isoformat()


def parse_forecast_days(payload: dict[str, Any] | None) -> list[ForecastDay]:
    """Build rated ForecastDays from a Pirate Weather response.

    The daily ``time`` is local midnight as a unix timestamp, so it is
    converted with the payload's UTC ``offset`` (hours) when present.
    Highs prefer ``temperatureHigh`` over ``temperatureMax``, lows prefer
    ``temperatureLow`` over ``temperatureMin``. A day missing either
    temperature is rated unknown instead of being scored.

    Args:
        payload: Raw response dict (or None).

    Returns:
        Forecast days in upstream order. Empty if there is no daily data.
    """
    if not payload:
        return []

    tz = timezone(timedelta(hours=float(payload.get("offset") or 0)))
    daily: list[dict[str, Any]] = (payload.get("daily") or {}).get("data") or []

    days: list[ForecastDay] = []
    for entry in daily:
        if entry.get("time") is None:
            continue
        day_date = _local_date(entry["time"], tz)
        temp_high = _first_present(entry, "temperatureHigh", "temperatureMax")
        temp_low = _first_present(entry, "temperatureLow", "temperatureMin")
        summary = entry.get("summary") or ""
        icon = entry.get("icon") or ""

        if temp_high is None or temp_low is None:
            days.append(
                ForecastDay.unknown(day_date, temp_low, temp_high, summary=summary, icon=icon)
            )
            continue

        days.append(
            ForecastDay.rated(
                day_date,
                temp_low,
                temp_high,
                score_day(temp_low, temp_high),
                summary=summary,
                icon=icon,
            )
        )

    return days


def parse_current_conditions(payload: dict[str, Any] | None) -> CurrentConditions:
    """Extract ``currently`` temperature, summary, and icon."""
    currently = (payload or {}).get("currently") or {}
    return CurrentConditions(
        temperature=currently.get("temperature"),
        summary=currently.get("summary") or "",
        icon=currently.get("icon") or "",
    )


def build_forecast_result(
    payload: dict[str, Any] | None,
    lat: float,
    lon: float,
    *,
    today: date | None = None,
    cached: bool = False,
) -> ForecastResult:
    """Run the scoring pipeline over a forecast payload.

    Args:
        payload: Raw Pirate Weather response.
        lat: Latitude (also drives season timing).
        lon: Longitude.
        today: Date whose year is used for season timing (default: today UTC).
        cached: Whether the payload came from the cache.

    Returns:
        ForecastResult ready for JSON serialization or rendering.
    """
    days = parse_forecast_days(payload)
    best = find_best_window(days)
    recommendation = generate_recommendation(days, best)
    year = (today or datetime.now(UTC).date()).year

    return ForecastResult(
        location=Location(lat=lat, lon=lon),
        current=parse_current_conditions(payload),
        today=days[0] if days else None,
        days=days,
        best_window=WindowSummary.from_window(best) if best else None,
        recommendation=RecommendationOut.from_recommendation(recommendation),
        season=get_season_info(lat, year),
        cached=cached,
    )
