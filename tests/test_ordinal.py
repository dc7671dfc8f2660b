"""Tests for English ordinal rendering."""

from __future__ import annotations

import pytest

from ddate.format.ordinal import ordinalize


class TestOrdinalize:
    """Tests for ordinalize."""

    @pytest.mark.parametrize(
        "num,expected",
        [
            (1, "1st"),
            (2, "2nd"),
            (3, "3rd"),
            (4, "4th"),
            (10, "10th"),
            (21, "21st"),
            (22, "22nd"),
            (23, "23rd"),
            (50, "50th"),
            (73, "73rd"),
        ],
    )
    def test_regular_suffixes(self, num: int, expected: str) -> None:
        """Test the suffix follows the last digit."""
        assert ordinalize(num) == expected

    @pytest.mark.parametrize("num", [11, 12, 13])
    def test_teens_take_th(self, num: int) -> None:
        """Test 11, 12 and 13 are irregular."""
        assert ordinalize(num) == f"{num}th"

    def test_hundreds_keep_teens_exception(self) -> None:
        """Test the teens exception applies to the last two digits."""
        assert ordinalize(111) == "111th"
        assert ordinalize(112) == "112th"
        assert ordinalize(113) == "113th"

    def test_hundreds_regular(self) -> None:
        """Test 121, 1002 and 10003 keep regular suffixes."""
        assert ordinalize(121) == "121st"
        assert ordinalize(1002) == "1002nd"
        assert ordinalize(10003) == "10003rd"

    def test_zero(self) -> None:
        """Test zero renders as 0th."""
        assert ordinalize(0) == "0th"

    def test_every_day_of_season(self) -> None:
        """Test days 1-73 only ever use the four English suffixes."""
        for day in range(1, 74):
            result = ordinalize(day)
            assert result.startswith(str(day))
            assert result[len(str(day)):] in ("st", "nd", "rd", "th")
