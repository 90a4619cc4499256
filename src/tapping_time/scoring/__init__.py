"""Forecast scoring: day ratings, tapping windows, recommendations, season timing.

Pure functions only: no I/O, no HTTP, no caching. Safe to call from any
thread.

Public API:
  - models: Rating, RecommendationType, RatingThresholds, DayScore,
            ForecastDay, Window, Recommendation
  - rating: score_day
  - window: find_best_window
  - recommendation: generate_recommendation
  - season: SeasonReferencePoint, SEASON_REFERENCE_POINTS, SeasonInfo,
            get_season_info

Pipeline::

    (low, high) -> score_day -> [ForecastDay] -> find_best_window
        -> generate_recommendation
"""

from tapping_time.scoring.models import (
    DEFAULT_THRESHOLDS,
    MIN_WINDOW_SCORE,
    DayScore,
    ForecastDay,
    Rating,
    RatingThresholds,
    Recommendation,
    RecommendationType,
    Window,
)
from tapping_time.scoring.rating import score_day
from tapping_time.scoring.recommendation import generate_recommendation
from tapping_time.scoring.season import (
    SEASON_REFERENCE_POINTS,
    SeasonInfo,
    SeasonReferencePoint,
    get_season_info,
)
from tapping_time.scoring.window import find_best_window

__all__ = [
    "DEFAULT_THRESHOLDS",
    "MIN_WINDOW_SCORE",
    "SEASON_REFERENCE_POINTS",
    "DayScore",
    "ForecastDay",
    "Rating",
    "RatingThresholds",
    "Recommendation",
    "RecommendationType",
    "SeasonInfo",
    "SeasonReferencePoint",
    "Window",
    "find_best_window",
    "generate_recommendation",
    "get_season_info",
    "score_day",
]
