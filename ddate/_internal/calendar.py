"""Gregorian calendar utilities for ddate.

This module provides the proleptic Gregorian rules callers need to turn
a (year, month, day) date into the (year, day of year, leap flag) triple
the Discordian converter consumes.

This module is not part of the public API.
"""

from __future__ import annotations

from ddate._internal.constants import DAYS_IN_MONTH


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (astronomical numbering, can be negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
        >>> is_leap_year(2023)
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based day of the year for a month and day.

    The date is assumed valid; see validate_month and validate_day in
    ddate._internal.validation.

    Examples:
        >>> day_of_year(2017, 1, 1)
        1
        >>> day_of_year(2000, 3, 1)
        61
        >>> day_of_year(2017, 3, 1)
        60
    """
    result = _DAYS_BEFORE_MONTH[month] + day
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def month_and_day(year: int, doy: int) -> tuple[int, int]:
    """Convert a 1-based day of year to month and day.

    Args:
        year: The year (for leap year calculation).
        doy: Day of year (1-366).

    Returns:
        Tuple of (month, day).

    Raises:
        ValueError: If doy does not fall inside the year.
    """
    if doy >= 1:
        remaining = doy
        for month in range(1, 13):
            dim = days_in_month(year, month)
            if remaining <= dim:
                return (month, remaining)
            remaining -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "day_of_year",
    "month_and_day",
]
