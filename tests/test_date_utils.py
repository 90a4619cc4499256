"""Tests for day-of-year conversion and date labels."""

from __future__ import annotations

import pytest

from tapping_time.date_utils import date_range_label, day_of_year, doy_to_date, format_date


class TestDoyToDate:
    """Tests for day-of-year -> ISO date."""

    def test_first_day(self) -> None:
        assert doy_to_date(1, 2026) == "2026-01-01"

    def test_leap_year_feb_29(self) -> None:
        """Day 60 is Feb 29 in a leap year."""
        assert doy_to_date(60, 2024) == "2024-02-29"

    def test_non_leap_year_mar_1(self) -> None:
        """Day 60 is Mar 1 in a common year."""
        assert doy_to_date(60, 2026) == "2026-03-01"

    def test_before_leap_day_unaffected(self) -> None:
        assert doy_to_date(59, 2024) == "2024-02-28"
        assert doy_to_date(59, 2026) == "2026-02-28"

    def test_last_day(self) -> None:
        assert doy_to_date(366, 2024) == "2024-12-31"
        assert doy_to_date(365, 2026) == "2026-12-31"


class TestDayOfYear:
    """Tests for ISO date -> day-of-year."""

    @pytest.mark.parametrize(
        ("iso", "doy"),
        [("2026-01-01", 1), ("2026-03-01", 60), ("2024-03-01", 61), ("2026-12-31", 365)],
    )
    def test_day_of_year(self, iso: str, doy: int) -> None:
        assert day_of_year(iso) == doy

    def test_inverse_of_doy_to_date(self) -> None:
        assert day_of_year(doy_to_date(118, 2026)) == 118


class TestFormatDate:
    """Tests for short display dates."""

    def test_weekday_month_day(self) -> None:
        assert format_date("2026-03-03") == "Tue, Mar 3"

    def test_no_zero_padding(self) -> None:
        assert format_date("2026-02-14") == "Sat, Feb 14"


class TestDateRangeLabel:
    """Tests for window date-range labels."""

    def test_same_month(self) -> None:
        assert date_range_label("2026-03-03", "2026-03-05") == "Mar 3–5"

    def test_cross_month(self) -> None:
        assert date_range_label("2026-02-27", "2026-03-02") == "Feb 27–Mar 2"

    def test_single_day(self) -> None:
        assert date_range_label("2026-03-03", "2026-03-03") == "Tue, Mar 3"
