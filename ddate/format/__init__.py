"""Text formatting helpers.

Functions:
    ordinalize: Render a number as an English ordinal ("1st", "22nd").
"""

from __future__ import annotations

from ddate.format.ordinal import ordinalize

__all__: list[str] = [
    "ordinalize",
]
