"""Validation utilities for ddate.

Range checks shared by the calendar value types and the converter.

This module is not part of the public API.
"""

from __future__ import annotations

from ddate._internal.calendar import days_in_month, days_in_year
from ddate.errors import InvalidDayOfYear, ValidationError


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        ValidationError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_day_of_year(year: int, day_of_year: int) -> None:
    """Validate a 1-based day of year against the length of the year.

    Raises:
        ValidationError: If day_of_year is outside 1-365 (1-366 in leap years).
    """
    max_day = days_in_year(year)
    if day_of_year < 1 or day_of_year > max_day:
        raise ValidationError(
            f"day_of_year must be between 1 and {max_day} for {year}, "
            f"got {day_of_year}"
        )


def validate_ordinal0_day(ordinal0_day: int, is_leap: bool) -> None:
    """Validate a 0-based day of year against the leap flag.

    Args:
        ordinal0_day: Zero-based day offset (January 1 is 0).
        is_leap: Whether the year being converted has 366 days.

    Raises:
        InvalidDayOfYear: If ordinal0_day is outside 0-364 (0-365 if leap).
    """
    limit = 366 if is_leap else 365
    if ordinal0_day < 0 or ordinal0_day >= limit:
        raise InvalidDayOfYear(
            f"ordinal0_day must be between 0 and {limit - 1}, got {ordinal0_day}"
        )


__all__ = [
    "validate_month",
    "validate_day",
    "validate_day_of_year",
    "validate_ordinal0_day",
]
