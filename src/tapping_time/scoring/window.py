"""Find the best contiguous run of favorable forecast days."""

from __future__ import annotations

from tapping_time.scoring.models import MIN_WINDOW_SCORE, ForecastDay, Window


def _close_run(run: list[ForecastDay]) -> Window:
    return Window(
        start=run[0].date,
        end=run[-1].date,
        days=tuple(run),
        total_score=sum(day.score for day in run),
    )


def _is_better(candidate: Window, best: Window | None) -> bool:
    """Longer runs win; equal lengths fall back to total score."""
    if best is None:
        return True
    if candidate.length != best.length:
        return candidate.length > best.length
    return candidate.total_score > best.total_score


def find_best_window(days: list[ForecastDay]) -> Window | None:
    """Select the best run of consecutive days scoring good or better.

    Scans once, left to right. Each day with score >= 2 extends the open
    run; any other day closes it. A closed run replaces the best-so-far
    only if it is strictly longer, or equally long with a strictly higher
    total score, so the earliest of two identical runs is kept.

    Args:
        days: Forecast days in date order. Contiguity is not checked.

    Returns:
        The best Window, or None when no day qualifies.
    """
    best: Window | None = None
    current: list[ForecastDay] | None = None

    for day in days:
        if day.score >= MIN_WINDOW_SCORE:
            if current is None:
                current = []
            current.append(day)
            continue
        if current is not None:
            candidate = _close_run(current)
            if _is_better(candidate, best):
                best = candidate
            current = None

    # Forecast ended mid-run
    if current is not None:
        candidate = _close_run(current)
        if _is_better(candidate, best):
            best = candidate

    return best
