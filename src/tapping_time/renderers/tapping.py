"""Tapping-time HTML renderers.

Current conditions, the recommendation card with the best window, the
day-by-day forecast list, and the typical season timing card.
"""

from __future__ import annotations

from tapping_time.date_utils import date_range_label, format_date
from tapping_time.renderers import render_template
from tapping_time.renderers.weather_utils import format_temp, icon_to_label
from tapping_time.schemas import CurrentConditions, ForecastResult, RecommendationOut, WindowSummary
from tapping_time.scoring import ForecastDay, RecommendationType, SeasonInfo

# Emoji shown next to each recommendation type
RECOMMENDATION_ICONS: dict[RecommendationType, str] = {
    RecommendationType.TAP_NOW: "\U0001f3af",
    RecommendationType.UPCOMING: "\U0001f4c5",
    RecommendationType.NO_WINDOW: "\U0001f32b️",
    RecommendationType.SEASON_OVER: "☀️",
    RecommendationType.TOO_COLD: "❄️",
}


def build_current_html(current: CurrentConditions, today: ForecastDay | None) -> str:
    """Build the "Right Now" card."""
    return render_template(
        "current.html.j2",
        temperature=format_temp(current.temperature),
        summary=current.summary,
        icon_label=icon_to_label(current.icon),
        today_high=format_temp(today.temp_high) if today else None,
        today_low=format_temp(today.temp_low) if today else None,
        today_rating=today.rating.value if today else None,
    )


def build_recommendation_html(
    recommendation: RecommendationOut,
    best_window: WindowSummary | None,
) -> str:
    """Build the "Best Tapping Window" card."""
    window_dates = None
    window_detail = None
    if best_window is not None:
        window_dates = date_range_label(best_window.start_date, best_window.end_date)
        noun = "day" if best_window.length == 1 else "days"
        window_detail = f"{best_window.length} {noun} of favorable conditions"

    return render_template(
        "recommendation.html.j2",
        rec_type=recommendation.type.value,
        rec_icon=RECOMMENDATION_ICONS.get(recommendation.type, ""),
        message=recommendation.message,
        window_dates=window_dates,
        window_detail=window_detail,
    )


def build_forecast_days_html(days: list[ForecastDay]) -> str:
    """Build the day-by-day forecast list."""
    if not days:
        return "<p>No forecast data available.</p>"

    rows = [
        {
            "day_name": format_date(day.date),
            "high": format_temp(day.temp_high),
            "low": format_temp(day.temp_low),
            "conditions": icon_to_label(day.icon) or day.summary,
            "rating": day.rating.value,
            "rating_label": day.rating.value.title(),
        }
        for day in days
    ]
    return render_template("forecast_days.html.j2", rows=rows, day_count=len(rows))


def build_season_html(season: SeasonInfo | None) -> str:
    """Build the typical season timing card."""
    if season is None:
        return ""
    return render_template(
        "season.html.j2",
        tap_by=format_date(season.tap_by_date),
        season_end=format_date(season.season_end_date),
        message=season.message,
    )


def build_page_html(result: ForecastResult, updated: str = "") -> str:
    """Assemble the full page for one location."""
    return render_template(
        "base.html.j2",
        updated=updated,
        location=f"{result.location.lat:.1f}, {result.location.lon:.1f}",
        current_html=build_current_html(result.current, result.today),
        recommendation_html=build_recommendation_html(result.recommendation, result.best_window),
        forecast_html=build_forecast_days_html(result.days),
        season_html=build_season_html(result.season),
    )
