"""ddate: Discordian dates for Python.

Converts proleptic Gregorian dates to the Discordian calendar: five
73-day seasons, five-day weeks, apostolic and seasonal holydays, and
St. Tib's Day in leap years.

Conversion:
    to_discordian_string: (year, zero-based day, leap flag) to text
    convert: Same, as a structured DiscordianDate
    to_poee: Render any object exposing year and day_of_year

Types:
    CalendarDate: Gregorian date held as year and day of year
    CalendarFields: Protocol for year/day_of_year carriers
    DiscordianDate: Structured Discordian date
    Season, Weekday: Named calendar positions

Parsing and configuration:
    parse_date: Free-text date inference
    InferOptions, DateOrder: Parsing options
    load_config, DdateConfig: Environment-driven settings

Exceptions:
    DdateError: Base exception
    ValidationError: Invalid input values
    InvalidDayOfYear: Day offset does not fit the year
    ParseError: Failed to parse string
    ConfigurationError: Invalid environment setting

Example:
    >>> from ddate import CalendarDate, to_discordian_string
    >>> to_discordian_string(-1166, 0, False)
    'Sweetmorn, the 1st day of Chaos in the YOLD 0'
    >>> CalendarDate.from_ymd(2017, 11, 4).to_poee()
    'Pungenday, the 16th day of The Aftermath in the YOLD 3183'
"""

from __future__ import annotations

__version__ = "0.4.0"

# Calendar helpers
from ddate._internal.calendar import is_leap_year

# Units
from ddate.units.season import Season
from ddate.units.weekday import Weekday

# Core
from ddate.core.discordian import (
    DiscordianDate,
    convert,
    to_discordian_string,
    to_poee,
)
from ddate.core.fields import CalendarDate, CalendarFields

# Formatting
from ddate.format.ordinal import ordinalize

# Parsing and configuration
from ddate.infer import DateOrder, InferOptions, parse_date
from ddate.config import DdateConfig, load_config

# Exceptions
from ddate.errors import (
    ConfigurationError,
    DdateError,
    InvalidDayOfYear,
    ParseError,
    ValidationError,
)

__all__: list[str] = [
    "__version__",
    # Conversion
    "to_discordian_string",
    "to_poee",
    "convert",
    "ordinalize",
    "is_leap_year",
    # Types
    "CalendarDate",
    "CalendarFields",
    "DiscordianDate",
    "Season",
    "Weekday",
    # Parsing and configuration
    "parse_date",
    "InferOptions",
    "DateOrder",
    "load_config",
    "DdateConfig",
    # Exceptions
    "DdateError",
    "ValidationError",
    "InvalidDayOfYear",
    "ParseError",
    "ConfigurationError",
]
