"""English ordinal numerals.

The suffix is chosen from the trailing digits of the decimal string, so
the teens exception holds at every magnitude (111th, 112th, 113th) while
121st, 122nd and 123rd keep their regular suffixes.
"""

from __future__ import annotations


def ordinalize(num: int) -> str:
    """Render a number as an English ordinal.

    Args:
        num: The number to render.

    Returns:
        The decimal string followed by "st", "nd", "rd" or "th".

    Examples:
        >>> ordinalize(1)
        '1st'
        >>> ordinalize(12)
        '12th'
        >>> ordinalize(73)
        '73rd'
        >>> ordinalize(111)
        '111th'
        >>> ordinalize(121)
        '121st'
    """
    s = str(num)

    if s.endswith("1") and not s.endswith("11"):
        suffix = "st"
    elif s.endswith("2") and not s.endswith("12"):
        suffix = "nd"
    elif s.endswith("3") and not s.endswith("13"):
        suffix = "rd"
    else:
        suffix = "th"

    return s + suffix


__all__ = ["ordinalize"]
