"""Date layouts recognised by parse_date.

Each template pairs a regex with an extractor that pulls raw year, month
and day components out of a match. Years are returned as strings so the
caller can tell a two-digit year from a four-digit one.

Internal module - use parse_date() from ddate.infer instead.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Pattern

# Raw components: (year text, month, day)
Components = tuple[str, int, int]


@dataclass(frozen=True)
class FormatTemplate:
    """A date layout.

    Attributes:
        name: Human-readable name for the format.
        pattern: Compiled regex pattern for matching.
        extractor: Function taking the match and the configured date order
            ("YMD", "MDY" or "DMY") and returning raw components, or None
            when the match does not name a real month.
    """

    name: str
    pattern: Pattern[str]
    extractor: Callable[[re.Match[str], str], Components | None]


# Month name mappings
MONTH_NAMES = {
    "january": 1,
    "february": 2,
    "march": 3,
    "april": 4,
    "may": 5,
    "june": 6,
    "july": 7,
    "august": 8,
    "september": 9,
    "october": 10,
    "november": 11,
    "december": 12,
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "sept": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

# Trailing time of day, dropped before matching non-ISO layouts
TIME_SUFFIX_PATTERN = re.compile(
    r"(?:,?\s+|T)\d{1,2}:\d{2}(?::\d{2}(?:\.\d+)?)?\s*(?:[AaPp][Mm])?"
    r"(?:\s*(?:Z|[+-]\d{2}:?\d{2}))?$",
)

# ISO 8601 Date: YYYY-MM-DD, with an optional signed or extended year
_ISO_DATE_PATTERN = re.compile(r"^([+-]?\d{4,})-(\d{2})-(\d{2})$", re.ASCII)

# Slash separated: 2024/01/15, 01/15/2024, 15/01/24
_SLASH_DATE_PATTERN = re.compile(r"^(\d{1,4})/(\d{1,2})/(\d{1,4})$", re.ASCII)

# Dash separated with trailing year: 01-15-2024
_DASH_DATE_PATTERN = re.compile(r"^(\d{1,2})-(\d{1,2})-(\d{2}|\d{4})$", re.ASCII)

# Dot separated, European order: 15.01.2024
_DOT_DATE_PATTERN = re.compile(r"^(\d{1,2})\.(\d{1,2})\.(\d{2}|\d{4})$", re.ASCII)

# Named month first: Jan 15, 2024 / January 15th 2024
_NAMED_MONTH_MDY_PATTERN = re.compile(
    r"^([A-Za-z]+)\.?\s+(\d{1,2})(?:st|nd|rd|th)?,?\s+(-?\d{1,4})$",
)

# Day first: 15 Jan 2024 / 15th of January, 2024
_NAMED_MONTH_DMY_PATTERN = re.compile(
    r"^(\d{1,2})(?:st|nd|rd|th)?\s+(?:of\s+)?([A-Za-z]+)\.?,?\s+(-?\d{1,4})$",
)


def _extract_iso_date(match: re.Match[str], date_order: str) -> Components:
    return (match.group(1), int(match.group(2)), int(match.group(3)))


def _extract_slash_date(match: re.Match[str], date_order: str) -> Components:
    """Extract a slash date, honouring date_order unless the year leads."""
    g1, g2, g3 = match.group(1), match.group(2), match.group(3)
    if len(g1) >= 3 or date_order == "YMD":
        return (g1, int(g2), int(g3))
    if date_order == "DMY":
        return (g3, int(g2), int(g1))
    return (g3, int(g1), int(g2))


def _extract_dash_date(match: re.Match[str], date_order: str) -> Components:
    g1, g2, year = match.group(1), match.group(2), match.group(3)
    if date_order == "DMY":
        return (year, int(g2), int(g1))
    return (year, int(g1), int(g2))


def _extract_dot_date(match: re.Match[str], date_order: str) -> Components:
    return (match.group(3), int(match.group(2)), int(match.group(1)))


def _extract_named_mdy(match: re.Match[str], date_order: str) -> Components | None:
    month = MONTH_NAMES.get(match.group(1).lower())
    if month is None:
        return None
    return (match.group(3), month, int(match.group(2)))


def _extract_named_dmy(match: re.Match[str], date_order: str) -> Components | None:
    month = MONTH_NAMES.get(match.group(2).lower())
    if month is None:
        return None
    return (match.group(3), month, int(match.group(1)))


ISO_DATE_TEMPLATE = FormatTemplate(
    name="iso_date",
    pattern=_ISO_DATE_PATTERN,
    extractor=_extract_iso_date,
)

DATE_TEMPLATES: list[FormatTemplate] = [
    ISO_DATE_TEMPLATE,
    FormatTemplate(
        name="slash_date",
        pattern=_SLASH_DATE_PATTERN,
        extractor=_extract_slash_date,
    ),
    FormatTemplate(
        name="dash_date",
        pattern=_DASH_DATE_PATTERN,
        extractor=_extract_dash_date,
    ),
    FormatTemplate(
        name="dot_date",
        pattern=_DOT_DATE_PATTERN,
        extractor=_extract_dot_date,
    ),
    FormatTemplate(
        name="named_month_mdy",
        pattern=_NAMED_MONTH_MDY_PATTERN,
        extractor=_extract_named_mdy,
    ),
    FormatTemplate(
        name="named_month_dmy",
        pattern=_NAMED_MONTH_DMY_PATTERN,
        extractor=_extract_named_dmy,
    ),
]


__all__ = [
    "Components",
    "FormatTemplate",
    "DATE_TEMPLATES",
    "MONTH_NAMES",
    "TIME_SUFFIX_PATTERN",
]
