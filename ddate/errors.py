"""Ddate exception hierarchy.

All ddate-specific exceptions inherit from DdateError.
"""

from __future__ import annotations


class DdateError(Exception):
    """Base exception for all ddate errors."""

    pass


class ValidationError(DdateError):
    """Invalid input values.

    Raised when a calendar value is out of range or invalid.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Day of year beyond the length of the year
    """

    pass


class InvalidDayOfYear(ValidationError):
    """Zero-based day of year does not fit the year being converted.

    Raised by the converter when ordinal0_day is negative, or is not
    smaller than 365 (366 in a leap year).
    """

    pass


class ParseError(DdateError):
    """Failed to recognise a string as a calendar date.

    Examples:
        - Empty input
        - Unknown month name
        - Unsupported layout ("next tuesday")
    """

    pass


class ConfigurationError(DdateError):
    """An environment setting holds an unusable value."""

    pass


__all__ = [
    "DdateError",
    "ValidationError",
    "InvalidDayOfYear",
    "ParseError",
    "ConfigurationError",
]
