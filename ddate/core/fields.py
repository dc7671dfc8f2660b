"""Calendar field access for Discordian conversion.

The converter needs only two facts about a date: its year and its day
of the year. CalendarFields names that capability so any date type that
exposes them can be converted, and CalendarDate is the package's own
minimal value carrying exactly those fields.
"""

from __future__ import annotations

import datetime
from typing import Protocol, runtime_checkable

from ddate._internal.calendar import (
    day_of_year,
    is_leap_year,
    month_and_day,
)
from ddate._internal.validation import (
    validate_day,
    validate_day_of_year,
    validate_month,
)
from ddate.core.discordian import DiscordianDate, convert, to_poee


@runtime_checkable
class CalendarFields(Protocol):
    """Anything exposing a Gregorian year and a 1-based day of year."""

    @property
    def year(self) -> int: ...

    @property
    def day_of_year(self) -> int: ...


class CalendarDate:
    """A proleptic Gregorian date held as year and day of year.

    Year 0 exists (astronomical numbering) and equals 1 BCE.

    Attributes:
        year: The year (can be 0 or negative).
        day_of_year: Day of the year (1-366).

    Examples:
        >>> d = CalendarDate.from_ymd(2000, 2, 29)
        >>> d.day_of_year, d.ordinal0, d.is_leap_year
        (60, 59, True)
        >>> d.to_poee()
        "St. Tib's Day, in the YOLD 3166"
    """

    __slots__ = ("_year", "_day_of_year")

    def __init__(self, year: int, day_of_year: int) -> None:
        """Create a CalendarDate from year and 1-based day of year.

        Raises:
            ValidationError: If day_of_year does not fall inside the year.
        """
        validate_day_of_year(year, day_of_year)
        self._year = year
        self._day_of_year = day_of_year

    @classmethod
    def from_ymd(cls, year: int, month: int, day: int) -> CalendarDate:
        """Create a CalendarDate from year, month and day of month.

        Raises:
            ValidationError: If month or day is out of range.

        Examples:
            >>> CalendarDate.from_ymd(2017, 3, 1)
            CalendarDate(2017, 60)
        """
        validate_month(month)
        validate_day(year, month, day)
        return cls(year, day_of_year(year, month, day))

    @classmethod
    def from_date(cls, value: datetime.date) -> CalendarDate:
        """Create a CalendarDate from a standard library date or datetime."""
        return cls(value.year, value.timetuple().tm_yday)

    @classmethod
    def today(cls) -> CalendarDate:
        """Return today's date in the local timezone."""
        return cls.from_date(datetime.date.today())

    @property
    def year(self) -> int:
        return self._year

    @property
    def day_of_year(self) -> int:
        return self._day_of_year

    @property
    def ordinal0(self) -> int:
        """Return the zero-based day of the year (January 1 is 0)."""
        return self._day_of_year - 1

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self._year)

    @property
    def month(self) -> int:
        return month_and_day(self._year, self._day_of_year)[0]

    @property
    def day(self) -> int:
        return month_and_day(self._year, self._day_of_year)[1]

    def to_discordian(self) -> DiscordianDate:
        """Return the structured Discordian form of this date."""
        return convert(self._year, self.ordinal0, self.is_leap_year)

    def to_poee(self) -> str:
        """Return the Discordian date string for this date.

        Examples:
            >>> CalendarDate.from_ymd(2017, 11, 4).to_poee()
            'Pungenday, the 16th day of The Aftermath in the YOLD 3183'
        """
        return to_poee(self)

    def to_iso_format(self) -> str:
        """Return the date as an ISO 8601 string (YYYY-MM-DD).

        For negative years, returns -YYYY-MM-DD format.

        Examples:
            >>> CalendarDate.from_ymd(2017, 11, 4).to_iso_format()
            '2017-11-04'
            >>> CalendarDate.from_ymd(-1166, 1, 1).to_iso_format()
            '-1166-01-01'
        """
        month, day = month_and_day(self._year, self._day_of_year)
        if self._year >= 0:
            return f"{self._year:04d}-{month:02d}-{day:02d}"
        else:
            return f"{self._year:05d}-{month:02d}-{day:02d}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return (self._year, self._day_of_year) == (other._year, other._day_of_year)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return (self._year, self._day_of_year) < (other._year, other._day_of_year)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return (self._year, self._day_of_year) <= (other._year, other._day_of_year)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return (self._year, self._day_of_year) > (other._year, other._day_of_year)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return (self._year, self._day_of_year) >= (other._year, other._day_of_year)

    def __hash__(self) -> int:
        return hash((self._year, self._day_of_year))

    def __repr__(self) -> str:
        """Return a string like 'CalendarDate(2017, 308)'."""
        return f"CalendarDate({self._year}, {self._day_of_year})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["CalendarFields", "CalendarDate"]
