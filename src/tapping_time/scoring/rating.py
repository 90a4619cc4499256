"""Rate a single day's low/high temperatures for sap flow.

Sap runs when a freezing night is followed by a thawing day::

    freezes = low < freeze          (0 C)
    thaws   = high > thaw           (2 C)

Without both, the day is poor. With both, the ideal sub-ranges decide::

    low in [-7, -2] and high in [4, 10]  -> excellent (3)
    exactly one of the two               -> good      (2)
    neither                              -> fair      (1)
"""

from __future__ import annotations

from tapping_time.scoring.models import DEFAULT_THRESHOLDS, DayScore, Rating, RatingThresholds


def score_day(
    temp_low: float,
    temp_high: float,
    thresholds: RatingThresholds = DEFAULT_THRESHOLDS,
) -> DayScore:
    """Rate a day from its low and high temperature in Celsius.

    Args:
        temp_low: Overnight low (C).
        temp_high: Daytime high (C).
        thresholds: Freeze/thaw and ideal-range thresholds.

    Returns:
        DayScore with the rating and its score. Never ``unknown``.
    """
    freezes = temp_low < thresholds.freeze
    thaws = temp_high > thresholds.thaw
    if not freezes or not thaws:
        return DayScore.of(Rating.POOR)

    low_ideal = thresholds.ideal_low_min <= temp_low <= thresholds.ideal_low_max
    high_ideal = thresholds.ideal_high_min <= temp_high <= thresholds.ideal_high_max

    if low_ideal and high_ideal:
        return DayScore.of(Rating.EXCELLENT)
    if low_ideal or high_ideal:
        return DayScore.of(Rating.GOOD)
    return DayScore.of(Rating.FAIR)
