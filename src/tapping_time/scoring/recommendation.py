"""Turn a forecast and its best window into a tapping recommendation.

Decision order:

1. No window: classify the whole forecast as season over (no freezing
   nights), too cold (no thawing days), or no window (mixed).
2. A 1-day window is never actionable: no window, naming the day.
3. Otherwise tap now if the window starts today, else upcoming.
"""

from __future__ import annotations

from tapping_time.date_utils import format_date
from tapping_time.scoring.models import (
    DEFAULT_THRESHOLDS,
    ForecastDay,
    Rating,
    RatingThresholds,
    Recommendation,
    RecommendationType,
    Window,
)

# Average score per day at or above which a window counts as excellent
EXCELLENT_AVG_SCORE = 2.5

# Windows at least this long are called out as a great stretch
GREAT_WINDOW_DAYS = 3

MSG_NO_DATA = "No forecast data available to evaluate."
MSG_SEASON_OVER = "Season may be over: no freezing nights in the forecast."
MSG_TOO_COLD = "Too cold: daytime temperatures aren't rising above freezing yet."
MSG_NO_WINDOW = "No strong tapping window in the current forecast."


def _classify_without_window(
    days: list[ForecastDay],
    thresholds: RatingThresholds,
) -> Recommendation:
    lows = [d.temp_low for d in days if d.temp_low is not None]
    highs = [d.temp_high for d in days if d.temp_high is not None]

    if not lows and not highs:
        return Recommendation(RecommendationType.NO_WINDOW, MSG_NO_DATA)
    # Only known temperatures count, and an empty list never qualifies
    if lows and all(low > thresholds.freeze for low in lows):
        return Recommendation(RecommendationType.SEASON_OVER, MSG_SEASON_OVER)
    if highs and all(high <= thresholds.thaw for high in highs):
        return Recommendation(RecommendationType.TOO_COLD, MSG_TOO_COLD)
    return Recommendation(RecommendationType.NO_WINDOW, MSG_NO_WINDOW)


def _plural_days(n: int) -> str:
    return f"{n} day" if n == 1 else f"{n} days"


def generate_recommendation(
    days: list[ForecastDay],
    best_window: Window | None,
    thresholds: RatingThresholds = DEFAULT_THRESHOLDS,
) -> Recommendation:
    """Classify the forecast into one of the five recommendation types.

    Args:
        days: Full forecast in date order; ``days[0]`` is today.
        best_window: Result of ``find_best_window(days)``.
        thresholds: Freeze/thaw thresholds for the no-window checks.

    Returns:
        Recommendation with its type and message.
    """
    if best_window is None or not best_window.days:
        return _classify_without_window(days, thresholds)

    is_today = bool(days) and best_window.start == days[0].date
    length = best_window.length

    if length == 1:
        when = "today" if is_today else f"coming {format_date(best_window.start)}"
        return Recommendation(
            RecommendationType.NO_WINDOW,
            f"Only a 1-day window {when}. Wait for a longer stretch of freeze-thaw days.",
        )

    quality = (
        Rating.EXCELLENT if best_window.avg_score >= EXCELLENT_AVG_SCORE else Rating.GOOD
    ).value

    if is_today:
        message = f"Tap now: {quality} conditions for the next {_plural_days(length)}."
        if length >= GREAT_WINDOW_DAYS:
            message += " Great stretch of freeze-thaw weather!"
        return Recommendation(RecommendationType.TAP_NOW, message)

    prefix = "Great window" if length >= GREAT_WINDOW_DAYS else "Good window"
    return Recommendation(
        RecommendationType.UPCOMING,
        f"{prefix} coming {format_date(best_window.start)}: "
        f"{_plural_days(length)} of {quality} conditions.",
    )
