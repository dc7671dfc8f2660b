"""Gregorian to Discordian date conversion.

The Discordian year starts on January 1 and is divided into five seasons
of 73 days. Weeks last five days and restart with the year. In leap years
February 29 becomes St. Tib's Day, which sits outside every season and
week; the days after it are shifted back by one so the rest of the year
lines up with a common year.

Examples:
    >>> to_discordian_string(2017, 307, False)
    'Pungenday, the 16th day of The Aftermath in the YOLD 3183'

    >>> to_discordian_string(2000, 59, True)
    "St. Tib's Day, in the YOLD 3166"

    >>> date = convert(2017, 268, False)
    >>> date.season, date.day_of_season, date.holyday
    (<Season.BUREAUCRACY: 3>, 50, 'Bureflux')
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ddate._internal.calendar import is_leap_year
from ddate._internal.constants import (
    APOSTLE_HOLYDAY,
    CURSE_OF_GREYFACE,
    SEASON_DAYS,
    SEASON_HOLYDAY,
    ST_TIBS_DAY,
    WEEK_DAYS,
)
from ddate._internal.validation import validate_ordinal0_day
from ddate.format.ordinal import ordinalize
from ddate.units.season import Season
from ddate.units.weekday import Weekday

if TYPE_CHECKING:
    from ddate.core.fields import CalendarFields


@dataclass(frozen=True)
class DiscordianDate:
    """A date in the Discordian calendar.

    St. Tib's Day is represented with season, day_of_season and weekday
    all set to None.

    Attributes:
        yold: Year of Our Lady of Discord (Gregorian year + 1166).
        season: The season, or None on St. Tib's Day.
        day_of_season: Day within the season (1-73), or None on St. Tib's Day.
        weekday: Day of the week, or None on St. Tib's Day.
        holyday: Name of the holyday celebrated on this date, if any.
    """

    yold: int
    season: Season | None = None
    day_of_season: int | None = None
    weekday: Weekday | None = None
    holyday: str | None = None

    @property
    def is_st_tibs_day(self) -> bool:
        """Return True for the leap day that belongs to no season."""
        return self.season is None

    def __str__(self) -> str:
        """Return the date in the form printed by ddate.

        Examples:
            >>> str(DiscordianDate(3183, Season.THE_AFTERMATH, 5, Weekday.BOOMTIME, "Maladay"))
            'Boomtime, the 5th day of The Aftermath in the YOLD 3183\\nCelebrate Maladay'
        """
        if self.season is None:
            return f"St. Tib's Day, in the YOLD {self.yold}"

        celebration = f"\nCelebrate {self.holyday}" if self.holyday else ""
        return (
            f"{self.weekday}, the {ordinalize(self.day_of_season)} day of "  # type: ignore[arg-type]
            f"{self.season} in the YOLD {self.yold}{celebration}"
        )


def convert(year: int, ordinal0_day: int, is_leap: bool) -> DiscordianDate:
    """Convert a Gregorian year and day offset to a DiscordianDate.

    Args:
        year: The Gregorian year (astronomical numbering, can be 0 or negative).
        ordinal0_day: Zero-based day of the year (January 1 is 0).
        is_leap: Whether the Gregorian year is a leap year. Trusted as given.

    Returns:
        The corresponding DiscordianDate.

    Raises:
        InvalidDayOfYear: If ordinal0_day does not fit a year of that length.
    """
    validate_ordinal0_day(ordinal0_day, is_leap)

    yold = year + CURSE_OF_GREYFACE

    if is_leap and ordinal0_day == ST_TIBS_DAY:
        return DiscordianDate(yold)

    day_offset = ordinal0_day - 1 if is_leap and ordinal0_day > ST_TIBS_DAY else ordinal0_day

    season = Season.from_index(day_offset // SEASON_DAYS)
    day_of_season = day_offset % SEASON_DAYS + 1
    weekday = Weekday.from_index(day_offset % WEEK_DAYS)

    if day_of_season == APOSTLE_HOLYDAY:
        holyday: str | None = season.apostle
    elif day_of_season == SEASON_HOLYDAY:
        holyday = season.seasonal_holyday
    else:
        holyday = None

    return DiscordianDate(yold, season, day_of_season, weekday, holyday)


def to_discordian_string(year: int, ordinal0_day: int, is_leap: bool) -> str:
    """Return the Discordian date string for a Gregorian year and day offset.

    Args:
        year: The Gregorian year (astronomical numbering, can be 0 or negative).
        ordinal0_day: Zero-based day of the year (January 1 is 0).
        is_leap: Whether the Gregorian year is a leap year.

    Returns:
        A string such as "Sweetmorn, the 1st day of Chaos in the YOLD 0",
        followed by "\\nCelebrate <holyday>" on holydays.

    Raises:
        InvalidDayOfYear: If ordinal0_day does not fit a year of that length.
    """
    return str(convert(year, ordinal0_day, is_leap))


def to_poee(fields: CalendarFields) -> str:
    """Return the Discordian date string for any object with calendar fields.

    The leap flag is derived from the year with the Gregorian rule.

    Examples:
        >>> from ddate.core.fields import CalendarDate
        >>> to_poee(CalendarDate.from_ymd(2017, 11, 4))
        'Pungenday, the 16th day of The Aftermath in the YOLD 3183'
    """
    year = fields.year
    return to_discordian_string(year, fields.day_of_year - 1, is_leap_year(year))


__all__ = [
    "DiscordianDate",
    "convert",
    "to_discordian_string",
    "to_poee",
]
