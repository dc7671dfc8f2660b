"""Free-text date inference.

This module turns the date strings people actually type into a
CalendarDate that can be rendered as a Discordian date.

Public API:
    parse_date: Parse a date string with automatic layout detection.
    InferOptions: Configuration for parsing ambiguous layouts.
    DateOrder: Enum for date component ordering (YMD, MDY, DMY).

Recognised input:
    - "today" / "now"
    - ISO 8601 dates ("2017-11-04", "-1166-01-01"), optionally with a time
    - Slash/dash/dot separated dates (configurable order)
    - Named month dates ("Nov 4, 2017", "4 November 2017")
    - Anything else dateutil can read as a full date ("20170926",
      "Tuesday, September 26, 2017")

Any time of day is accepted and ignored; time zones play no part.

Examples:
    >>> from ddate.infer import parse_date
    >>> parse_date("Nov 4, 2017")
    CalendarDate(2017, 308)

    >>> from ddate.infer import InferOptions, DateOrder
    >>> parse_date("04/11/2017", InferOptions(date_order=DateOrder.DMY))
    CalendarDate(2017, 308)
"""

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass
from enum import Enum

from dateutil import parser as dateutil_parser

from ddate.core.fields import CalendarDate
from ddate.errors import ParseError
from ddate.infer._formats import DATE_TEMPLATES, TIME_SUFFIX_PATTERN

logger = logging.getLogger(__name__)

# Keywords resolving to the reference date
TODAY_KEYWORDS = frozenset({"today", "now"})


class DateOrder(Enum):
    """Order of date components in ambiguous formats.

    Used to resolve formats like "01/02/2024" which could be
    January 2nd (MDY) or February 1st (DMY).

    Values:
        YMD: Year-Month-Day (ISO-like, unambiguous)
        MDY: Month-Day-Year (US convention)
        DMY: Day-Month-Year (European convention)
    """

    YMD = "YMD"
    MDY = "MDY"
    DMY = "DMY"


@dataclass(frozen=True)
class InferOptions:
    """Configuration for free-text date parsing.

    Attributes:
        date_order: Order for ambiguous slash and dash dates.
        default_century: Base century for 2-digit years (e.g., 2000).

    Examples:
        >>> opts = InferOptions(date_order=DateOrder.DMY)
        >>> # Now "01/02/2024" is interpreted as February 1, 2024
    """

    date_order: DateOrder = DateOrder.MDY
    default_century: int = 2000


def parse_date(
    text: str,
    options: InferOptions | None = None,
    today: CalendarDate | None = None,
) -> CalendarDate:
    """Parse a date string with automatic layout detection.

    The layouts in ddate.infer._formats are tried first. Anything they do
    not recognise is handed to dateutil's parser, which accepts forms such
    as "20170926", "2017-9-26", "Tuesday, September 26, 2017" or
    "Sep 26 2017 6pm". Times of day and zone names are ignored.

    Two-digit years matched by the layouts are added to
    options.default_century, so "Nov 4, 99" is 2099 by default; pass
    InferOptions(default_century=1900) for the 1900s. Two-digit years
    only dateutil recognises use its window of 50 years around today.

    Args:
        text: The string to parse.
        options: Configuration for handling ambiguous layouts.
            If None, uses default options (MDY order, 2000s century).
        today: Date that "today" and "now" resolve to.
            If None, the local system date is used.

    Returns:
        The parsed CalendarDate.

    Raises:
        ParseError: If the input does not name a complete calendar date.
        ValidationError: If a layout matches but names an impossible date
            (e.g., "2023-02-29").

    Examples:
        >>> parse_date("2000-02-29").to_poee()
        "St. Tib's Day, in the YOLD 3166"

        >>> parse_date("2017-09-26 18:00").day_of_year
        269
    """
    if options is None:
        options = InferOptions()

    text = text.strip()
    if not text:
        raise ParseError("empty string")

    if text.lower() in TODAY_KEYWORDS:
        return today if today is not None else CalendarDate.today()

    candidate = TIME_SUFFIX_PATTERN.sub("", text).strip()

    for template in DATE_TEMPLATES:
        match = template.pattern.match(candidate)
        if not match:
            continue

        components = template.extractor(match, options.date_order.value)
        if components is None:
            continue

        year_text, month, day = components
        year = int(year_text)
        if len(year_text.lstrip("+-")) <= 2 and year >= 0:
            year = options.default_century + year

        logger.debug(
            "Matched %r as %s: year=%d month=%d day=%d",
            text,
            template.name,
            year,
            month,
            day,
        )
        return CalendarDate.from_ymd(year, month, day)

    return _parse_with_dateutil(text, options)


# Two unrelated defaults: a component dateutil fills in from the default
# differs between the two results, so the input did not name it.
_DEFAULTS = (datetime.datetime(2000, 1, 1), datetime.datetime(2001, 2, 2))


def _parse_with_dateutil(text: str, options: InferOptions) -> CalendarDate:
    """Parse text with dateutil, requiring year, month and day to be given.

    Raises:
        ParseError: If dateutil rejects the text or it lacks a date part.
    """
    results = []
    for default in _DEFAULTS:
        try:
            parsed = dateutil_parser.parse(
                text,
                default=default,
                dayfirst=options.date_order == DateOrder.DMY,
                yearfirst=options.date_order == DateOrder.YMD,
                ignoretz=True,
            )
        except (ValueError, OverflowError) as e:
            raise ParseError(
                f"cannot determine format for: {text!r}. "
                "Expected a calendar date in a recognized format."
            ) from e
        results.append(parsed.date())

    if results[0] != results[1]:
        raise ParseError(f"incomplete date: {text!r} needs a year, month and day")

    logger.debug("Parsed %r with dateutil as %s", text, results[0])
    return CalendarDate.from_date(results[0])


__all__ = [
    "DateOrder",
    "InferOptions",
    "parse_date",
]
