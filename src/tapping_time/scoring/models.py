"""Scoring data models and thresholds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Rating(StrEnum):
    """Qualitative sap-flow rating for a single day."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
    UNKNOWN = "unknown"

    @property
    def score(self) -> int:
        """Numeric score: excellent 3, good 2, fair 1, poor/unknown 0."""
        return _RATING_SCORES[self]


_RATING_SCORES: dict[Rating, int] = {
    Rating.EXCELLENT: 3,
    Rating.GOOD: 2,
    Rating.FAIR: 1,
    Rating.POOR: 0,
    Rating.UNKNOWN: 0,
}

# Days scoring at least this much can join a window
MIN_WINDOW_SCORE = 2


class RecommendationType(StrEnum):
    """Overall tapping recommendation category."""

    TAP_NOW = "tap_now"
    UPCOMING = "upcoming"
    NO_WINDOW = "no_window"
    SEASON_OVER = "season_over"
    TOO_COLD = "too_cold"


@dataclass(frozen=True)
class RatingThresholds:
    """Temperature thresholds (all in Celsius) used to rate a day.

    A day needs a low strictly below ``freeze`` and a high strictly above
    ``thaw`` to count as a freeze-thaw day at all. The ideal ranges are
    inclusive at both ends.
    """

    freeze: float = 0.0
    thaw: float = 2.0
    ideal_low_min: float = -7.0
    ideal_low_max: float = -2.0
    ideal_high_min: float = 4.0
    ideal_high_max: float = 10.0


DEFAULT_THRESHOLDS = RatingThresholds()


@dataclass(frozen=True)
class DayScore:
    """A rating together with its score."""

    rating: Rating
    score: int

    @classmethod
    def of(cls, rating: Rating) -> DayScore:
        return cls(rating=rating, score=rating.score)


@dataclass(frozen=True)
class ForecastDay:
    """One calendar day of forecast, rated for sap flow."""

    date: str
    temp_low: float | None
    temp_high: float | None
    summary: str
    icon: str
    rating: Rating
    score: int

    @classmethod
    def rated(
        cls,
        date: str,
        temp_low: float,
        temp_high: float,
        day_score: DayScore,
        summary: str = "",
        icon: str = "",
    ) -> ForecastDay:
        """Build a day from known temperatures and their score."""
        return cls(
            date=date,
            temp_low=temp_low,
            temp_high=temp_high,
            summary=summary,
            icon=icon,
            rating=day_score.rating,
            score=day_score.score,
        )

    @classmethod
    def unknown(
        cls,
        date: str,
        temp_low: float | None = None,
        temp_high: float | None = None,
        summary: str = "",
        icon: str = "",
    ) -> ForecastDay:
        """Build a day whose temperature data is incomplete."""
        return cls(
            date=date,
            temp_low=temp_low,
            temp_high=temp_high,
            summary=summary,
            icon=icon,
            rating=Rating.UNKNOWN,
            score=0,
        )


@dataclass(frozen=True)
class Window:
    """A contiguous run of good-or-better days."""

    start: str
    end: str
    days: tuple[ForecastDay, ...]
    total_score: int

    @property
    def length(self) -> int:
        return len(self.days)

    @property
    def avg_score(self) -> float:
        """Mean score per day (0.0 for an empty window)."""
        return self.total_score / self.length if self.days else 0.0


@dataclass(frozen=True)
class Recommendation:
    """Recommendation category with its rendered message."""

    type: RecommendationType
    message: str
