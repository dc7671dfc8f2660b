"""Weekday enumeration for the Discordian five-day week."""

from __future__ import annotations

from enum import Enum

from ddate._internal.constants import WEEKDAYS


class Weekday(Enum):
    """Day of the Discordian week.

    The week restarts with Sweetmorn on the first day of every year, so
    a year of 365 days holds exactly 73 weeks.

    Examples:
        >>> Weekday.from_index(3).display_name
        'Prickle-Prickle'
    """

    SWEETMORN = 0
    BOOMTIME = 1
    PUNGENDAY = 2
    PRICKLE_PRICKLE = 3
    SETTING_ORANGE = 4

    @classmethod
    def from_index(cls, index: int) -> Weekday:
        return cls(index)

    @property
    def display_name(self) -> str:
        return WEEKDAYS[self.value]

    def __str__(self) -> str:
        return self.display_name


__all__ = ["Weekday"]
