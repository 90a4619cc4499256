"""Typical sap-season timing by latitude.

Hand-curated reference points give the day-of-year by which trees should
be tapped and the day the season usually ends. Latitudes between points
are linearly interpolated; latitudes outside the table are clamped to its
ends. Southern latitudes mirror northern ones.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from tapping_time.date_utils import doy_to_date, format_date


@dataclass(frozen=True)
class SeasonReferencePoint:
    """Typical timing at one latitude, as days of the year."""

    lat: float
    tap_by_doy: int
    season_end_doy: int


# Ordered by latitude
SEASON_REFERENCE_POINTS: tuple[SeasonReferencePoint, ...] = (
    SeasonReferencePoint(lat=39, tap_by_doy=45, season_end_doy=59),
    SeasonReferencePoint(lat=43, tap_by_doy=65, season_end_doy=79),
    SeasonReferencePoint(lat=45, tap_by_doy=76, season_end_doy=90),
    SeasonReferencePoint(lat=47, tap_by_doy=94, season_end_doy=108),
    SeasonReferencePoint(lat=49, tap_by_doy=104, season_end_doy=118),
)


@dataclass(frozen=True)
class SeasonInfo:
    """Typical tap-by and season-end dates for a latitude and year."""

    tap_by_date: str
    season_end_date: str
    message: str


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _interpolate_doys(
    lat: float,
    points: tuple[SeasonReferencePoint, ...],
) -> tuple[int, int]:
    """Return (tap_by_doy, season_end_doy) for an already-clamped latitude."""
    first, last = points[0], points[-1]
    if lat <= first.lat:
        return first.tap_by_doy, first.season_end_doy
    if lat >= last.lat:
        return last.tap_by_doy, last.season_end_doy

    for lower, upper in zip(points, points[1:]):
        if lower.lat <= lat <= upper.lat:
            t = (lat - lower.lat) / (upper.lat - lower.lat)
            tap_by = lower.tap_by_doy + t * (upper.tap_by_doy - lower.tap_by_doy)
            season_end = lower.season_end_doy + t * (upper.season_end_doy - lower.season_end_doy)
            return _round_half_up(tap_by), _round_half_up(season_end)

    # Unreachable for a sorted table
    return last.tap_by_doy, last.season_end_doy


def get_season_info(
    latitude: float,
    year: int,
    points: tuple[SeasonReferencePoint, ...] = SEASON_REFERENCE_POINTS,
) -> SeasonInfo:
    """Estimate typical tap-by and season-end dates for a location.

    Args:
        latitude: Degrees, either hemisphere.
        year: Calendar year the dates fall in.
        points: Reference table, ordered by latitude.

    Returns:
        SeasonInfo with ISO dates and an advisory message.
    """
    lat = min(max(abs(latitude), points[0].lat), points[-1].lat)
    tap_by_doy, season_end_doy = _interpolate_doys(lat, points)

    tap_by_date = doy_to_date(tap_by_doy, year)
    season_end_date = doy_to_date(season_end_doy, year)
    message = (
        f"In a typical year the sap season here ends around {format_date(season_end_date)}. "
        f"If no ideal window has appeared, tap by {format_date(tap_by_date)} anyway; "
        "tapping early does not reduce yield."
    )
    return SeasonInfo(tap_by_date=tap_by_date, season_end_date=season_end_date, message=message)
