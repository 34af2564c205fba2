# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Calendar date to decimal year conversion.

Decimal Year = YYYY + (day_of_year - 1) / days_in_year

Resolution is one day: the time of day does not contribute.
No external dependencies, only stdlib datetime.
"""
from datetime import date, datetime, timezone


def is_leap_year(year: int) -> bool:
    """Gregorian leap year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def decimal_year(when: date | datetime) -> float:
    """
    Convert a calendar date or UTC instant to a decimal year.

    Aware datetimes are converted to UTC before the calendar fields are
    read. Naive datetimes are taken to be UTC already.

    Args:
        when: Calendar date or datetime.

    Returns:
        Decimal year, e.g. 2025.0 for 2025-01-01.
    """
    if isinstance(when, datetime) and when.tzinfo is not None:
        when = when.astimezone(timezone.utc)

    day_of_year = when.timetuple().tm_yday
    return when.year + (day_of_year - 1) / days_in_year(when.year)
