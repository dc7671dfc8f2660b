"""Internal utilities for ddate.

This module contains private implementation details:
    - Calendar name tables and constants
    - Gregorian leap year and day-of-year helpers
    - Range validation

Note: This module is not part of the public API.
"""

from __future__ import annotations

from ddate._internal.calendar import (
    day_of_year,
    days_in_month,
    days_in_year,
    is_leap_year,
    month_and_day,
)
from ddate._internal.validation import (
    validate_day,
    validate_day_of_year,
    validate_month,
    validate_ordinal0_day,
)

__all__: list[str] = [
    "day_of_year",
    "days_in_month",
    "days_in_year",
    "is_leap_year",
    "month_and_day",
    "validate_day",
    "validate_day_of_year",
    "validate_month",
    "validate_ordinal0_day",
]
