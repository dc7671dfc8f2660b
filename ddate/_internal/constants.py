"""Internal constants for ddate.

Name tables and the magic numbers of the Discordian calendar. This module
is not part of the public API.
"""

from __future__ import annotations

# The Curse of Greyface occurred in 1166 BCE
CURSE_OF_GREYFACE: int = 1166

# Zero-based day of a leap year that St. Tib's Day occupies (February 29)
ST_TIBS_DAY: int = 59

SEASON_DAYS: int = 73
WEEK_DAYS: int = 5

# Day of the season each kind of holyday falls on
APOSTLE_HOLYDAY: int = 5
SEASON_HOLYDAY: int = 50

SEASONS: tuple[str, ...] = (
    "Chaos",
    "Discord",
    "Confusion",
    "Bureaucracy",
    "The Aftermath",
)

WEEKDAYS: tuple[str, ...] = (
    "Sweetmorn",
    "Boomtime",
    "Pungenday",
    "Prickle-Prickle",
    "Setting Orange",
)

# Apostolic holydays, indexed by season
APOSTLES: tuple[str, ...] = ("Mungday", "Mojoday", "Syaday", "Zaraday", "Maladay")

# Seasonal holydays, indexed by season
HOLYDAYS: tuple[str, ...] = (
    "Chaoflux",
    "Discoflux",
    "Confuflux",
    "Bureflux",
    "Afflux",
)

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)


__all__ = [
    "CURSE_OF_GREYFACE",
    "ST_TIBS_DAY",
    "SEASON_DAYS",
    "WEEK_DAYS",
    "APOSTLE_HOLYDAY",
    "SEASON_HOLYDAY",
    "SEASONS",
    "WEEKDAYS",
    "APOSTLES",
    "HOLYDAYS",
    "DAYS_IN_MONTH",
]
