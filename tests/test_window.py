"""Tests for best-window selection."""

from __future__ import annotations

from datetime import date, timedelta

from tapping_time.scoring import DayScore, ForecastDay, Rating, Window, find_best_window


def make_days(*ratings: Rating, start: date = date(2026, 3, 2)) -> list[ForecastDay]:
    """Consecutive forecast days with the given ratings."""
    return [
        ForecastDay.rated(
            (start + timedelta(days=i)).isoformat(),
            -4.0,
            6.0,
            DayScore.of(rating),
        )
        for i, rating in enumerate(ratings)
    ]


E, G, F, P = Rating.EXCELLENT, Rating.GOOD, Rating.FAIR, Rating.POOR


class TestFindBestWindowEmpty:
    """Inputs with no qualifying day."""

    def test_empty(self) -> None:
        assert find_best_window([]) is None

    def test_all_poor(self) -> None:
        assert find_best_window(make_days(P, P, P)) is None

    def test_all_fair(self) -> None:
        """Fair days (score 1) never open a window."""
        assert find_best_window(make_days(F, F, F, F)) is None

    def test_unknown_days_excluded(self) -> None:
        days = [ForecastDay.unknown("2026-03-02"), ForecastDay.unknown("2026-03-03")]
        assert find_best_window(days) is None


class TestFindBestWindowRuns:
    """Runs are built from consecutive good-or-better days."""

    def test_three_excellent_then_poor(self) -> None:
        result = find_best_window(make_days(E, E, E, P))
        assert result is not None
        assert result.start == "2026-03-02"
        assert result.end == "2026-03-04"
        assert result.length == 3
        assert result.total_score == 9

    def test_single_day_window(self) -> None:
        result = find_best_window(make_days(P, G, P))
        assert result is not None
        assert result.start == result.end == "2026-03-03"
        assert result.length == 1
        assert result.total_score == 2

    def test_trailing_run_closed(self) -> None:
        """A run still open at the end of the forecast is considered."""
        result = find_best_window(make_days(P, G, P, E, E, G))
        assert result is not None
        assert result.start == "2026-03-05"
        assert result.end == "2026-03-07"
        assert result.total_score == 8

    def test_breaking_day_not_included(self) -> None:
        result = find_best_window(make_days(G, G, F, G))
        assert result is not None
        assert [d.rating for d in result.days] == [G, G]

    def test_members_all_score_at_least_two(self) -> None:
        result = find_best_window(make_days(G, E, G, F, E))
        assert result is not None
        assert all(d.score >= 2 for d in result.days)


class TestFindBestWindowTieBreak:
    """Longer wins; equal length falls back to total score."""

    def test_equal_length_higher_score_wins(self) -> None:
        """Two 2-day runs scoring 4 and 6: the 6 is chosen."""
        result = find_best_window(make_days(G, G, P, E, E))
        assert result is not None
        assert result.total_score == 6
        assert result.start == "2026-03-05"

    def test_longer_beats_higher_average(self) -> None:
        result = find_best_window(make_days(E, E, P, G, G, G))
        assert result is not None
        assert result.length == 3
        assert result.total_score == 6

    def test_identical_runs_keep_earliest(self) -> None:
        result = find_best_window(make_days(G, E, P, E, G))
        assert result is not None
        assert result.start == "2026-03-02"


class TestWindow:
    """Window derived properties."""

    def test_avg_score(self) -> None:
        days = tuple(make_days(E, G))
        window = Window(start=days[0].date, end=days[-1].date, days=days, total_score=5)
        assert window.length == 2
        assert window.avg_score == 2.5
