"""Core types and conversion.

    CalendarFields: Protocol for objects exposing year and day_of_year
    CalendarDate: Gregorian date held as year and day of year
    DiscordianDate: Structured Discordian date
    convert: Gregorian (year, day offset, leap flag) to DiscordianDate
    to_discordian_string: Same, rendered as text
    to_poee: Render any CalendarFields object as a Discordian date
"""

from __future__ import annotations

from ddate.core.discordian import (
    DiscordianDate,
    convert,
    to_discordian_string,
    to_poee,
)
from ddate.core.fields import CalendarDate, CalendarFields

__all__: list[str] = [
    "CalendarDate",
    "CalendarFields",
    "DiscordianDate",
    "convert",
    "to_discordian_string",
    "to_poee",
]
