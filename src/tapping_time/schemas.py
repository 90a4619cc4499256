"""
Boundary models for the forecast result bundle.

Pydantic models for what the API returns and the renderers consume.
Scoring types are plain dataclasses; pydantic validates and serializes
them as nested fields.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from tapping_time.scoring import (
    ForecastDay,
    Recommendation,
    RecommendationType,
    SeasonInfo,
    Window,
)


class Location(BaseModel):
    """Geographic point in decimal degrees."""

    lat: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    lon: float = Field(..., ge=-180, le=180, allow_inf_nan=False)


class CurrentConditions(BaseModel):
    """Conditions right now at the forecast location."""

    temperature: float | None = None
    summary: str = ""
    icon: str = ""


class WindowSummary(BaseModel):
    """Best tapping window reduced for display."""

    start_date: str
    end_date: str
    length: int
    avg_score: float

    @classmethod
    def from_window(cls, window: Window) -> WindowSummary:
        return cls(
            start_date=window.start,
            end_date=window.end,
            length=window.length,
            avg_score=window.avg_score,
        )


class RecommendationOut(BaseModel):
    """Recommendation type and message."""

    type: RecommendationType
    message: str

    @classmethod
    def from_recommendation(cls, rec: Recommendation) -> RecommendationOut:
        return cls(type=rec.type, message=rec.message)


class ForecastResult(BaseModel):
    """Everything the front end needs to render one location."""

    location: Location
    current: CurrentConditions = Field(default_factory=CurrentConditions)
    today: ForecastDay | None = None
    days: list[ForecastDay] = Field(default_factory=list)
    best_window: WindowSummary | None = None
    recommendation: RecommendationOut
    season: SeasonInfo | None = None
    cached: bool = False
