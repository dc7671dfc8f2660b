"""Season enumeration for the Discordian calendar.

The Discordian year is split into five seasons of 73 days each. Every
season carries two holydays: an apostolic holyday on its 5th day and a
seasonal ("-flux") holyday on its 50th day.
"""

from __future__ import annotations

from enum import Enum

from ddate._internal.constants import APOSTLES, HOLYDAYS, SEASONS


class Season(Enum):
    """One of the five Discordian seasons, in calendar order.

    Examples:
        >>> Season.CHAOS.display_name
        'Chaos'
        >>> Season.from_index(4)
        <Season.THE_AFTERMATH: 4>
        >>> Season.BUREAUCRACY.seasonal_holyday
        'Bureflux'
    """

    CHAOS = 0
    DISCORD = 1
    CONFUSION = 2
    BUREAUCRACY = 3
    THE_AFTERMATH = 4

    @classmethod
    def from_index(cls, index: int) -> Season:
        """Return the season at a zero-based position in the year.

        Raises:
            ValueError: If index is outside 0-4.
        """
        return cls(index)

    @property
    def display_name(self) -> str:
        """Return the name as written in a Discordian date."""
        return SEASONS[self.value]

    @property
    def apostle(self) -> str:
        """Return the apostolic holyday falling on the 5th day."""
        return APOSTLES[self.value]

    @property
    def seasonal_holyday(self) -> str:
        """Return the seasonal holyday falling on the 50th day."""
        return HOLYDAYS[self.value]

    def __str__(self) -> str:
        return self.display_name


__all__ = ["Season"]
