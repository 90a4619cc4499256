"""Day-of-year conversion and date-formatting helpers.

All dates cross module boundaries as ISO ``YYYY-MM-DD`` strings.
"""

from __future__ import annotations

from datetime import date, timedelta


def doy_to_date(doy: int, year: int) -> str:
    """Convert a 1-based day-of-year to an ISO date string.

    Leap years are handled by ``datetime``: day 60 is Feb 29 in a leap
    year and Mar 1 otherwise.
    """
    return (date(year, 1, 1) + timedelta(days=doy - 1)).isoformat()


def day_of_year(date_str: str) -> int:
    """1-based day-of-year for an ISO date string."""
    return date.fromisoformat(date_str).timetuple().tm_yday


def format_date(date_str: str) -> str:
    """Short display form of an ISO date, e.g. ``Tue, Mar 3``."""
    d = date.fromisoformat(date_str)
    return f"{d.strftime('%a')}, {d.strftime('%b')} {d.day}"


def date_range_label(date_start: str, date_end: str) -> str:
    """Human-readable label for an inclusive date range.

    Returns e.g. ``Mar 3–5`` (same month), ``Feb 27–Mar 2``
    (cross-month), or ``Tue, Mar 3`` when the range is a single day.
    """
    if date_start == date_end:
        return format_date(date_start)
    start = date.fromisoformat(date_start)
    end = date.fromisoformat(date_end)
    start_str = f"{start.strftime('%b')} {start.day}"
    end_str = str(end.day) if start.month == end.month else f"{end.strftime('%b')} {end.day}"
    return f"{start_str}–{end_str}"
