"""Discordian calendar units.

This module provides the named positions of the Discordian calendar:
    - Season: the five 73-day seasons, with their holydays
    - Weekday: the five days of the Discordian week
"""

from __future__ import annotations

from ddate.units.season import Season
from ddate.units.weekday import Weekday

__all__: list[str] = [
    "Season",
    "Weekday",
]
