"""Tests for free-text date inference."""

from __future__ import annotations

import pytest

from ddate.core.fields import CalendarDate
from ddate.errors import ParseError, ValidationError
from ddate.infer import DateOrder, InferOptions, parse_date

NOV_4_2017 = CalendarDate(2017, 308)


class TestInferOptions:
    """Tests for InferOptions configuration."""

    def test_default_options(self) -> None:
        """Test default options are month first in the 2000s."""
        opts = InferOptions()
        assert opts.date_order == DateOrder.MDY
        assert opts.default_century == 2000

    def test_options_are_frozen(self) -> None:
        """Test InferOptions is immutable."""
        opts = InferOptions()
        with pytest.raises(AttributeError):
            opts.default_century = 1900  # type: ignore[misc]


class TestISODateParsing:
    """Tests for ISO 8601 dates."""

    def test_iso_date_basic(self) -> None:
        """Test parsing YYYY-MM-DD."""
        assert parse_date("2017-11-04") == NOV_4_2017

    def test_iso_date_negative_year(self) -> None:
        """Test parsing a signed year."""
        assert parse_date("-1166-01-01") == CalendarDate(-1166, 1)

    def test_iso_date_leap_day(self) -> None:
        """Test Feb 29 in a leap year."""
        assert parse_date("2000-02-29").to_poee() == "St. Tib's Day, in the YOLD 3166"

    def test_iso_datetime_time_ignored(self) -> None:
        """Test a trailing time of day is dropped."""
        assert parse_date("2017-09-26T18:30:00Z") == CalendarDate(2017, 269)
        assert parse_date("2017-09-26 18:30") == CalendarDate(2017, 269)
        assert parse_date("2017-09-26T23:59:59.123+05:30") == CalendarDate(2017, 269)

    def test_iso_ignores_date_order(self) -> None:
        """Test ISO dates are read the same under any order."""
        opts = InferOptions(date_order=DateOrder.DMY)
        assert parse_date("2017-11-04", opts) == NOV_4_2017


class TestSeparatedDates:
    """Tests for slash, dash and dot separated dates."""

    def test_slash_default_is_month_first(self) -> None:
        """Test slash dates default to MDY."""
        assert parse_date("11/04/2017") == NOV_4_2017

    def test_slash_dmy(self) -> None:
        """Test slash dates with DMY order."""
        opts = InferOptions(date_order=DateOrder.DMY)
        assert parse_date("04/11/2017", opts) == NOV_4_2017

    def test_slash_year_first(self) -> None:
        """Test a 4-digit leading year is always YMD."""
        opts = InferOptions(date_order=DateOrder.DMY)
        assert parse_date("2017/11/04", opts) == NOV_4_2017
        assert parse_date("2017/11/4") == NOV_4_2017

    def test_slash_two_digit_year(self) -> None:
        """Test 2-digit years use the default century."""
        assert parse_date("11/4/17") == NOV_4_2017
        opts = InferOptions(default_century=1900)
        assert parse_date("2/28/66", opts) == CalendarDate(1966, 59)

    def test_dash_mdy(self) -> None:
        """Test dash dates with trailing year."""
        assert parse_date("11-04-2017") == NOV_4_2017

    def test_dash_dmy(self) -> None:
        """Test dash dates with DMY order."""
        opts = InferOptions(date_order=DateOrder.DMY)
        assert parse_date("04-11-2017", opts) == NOV_4_2017

    def test_dot_date(self) -> None:
        """Test dot dates are day first."""
        assert parse_date("04.11.2017") == NOV_4_2017


class TestNamedMonthParsing:
    """Tests for dates with month names."""

    @pytest.mark.parametrize(
        "text",
        [
            "Nov 4, 2017",
            "Nov. 4 2017",
            "November 4th, 2017",
            "november 4 2017",
            "4 Nov 2017",
            "4th of November, 2017",
            "4 NOVEMBER 2017",
        ],
    )
    def test_named_month(self, text: str) -> None:
        """Test month name layouts."""
        assert parse_date(text) == NOV_4_2017

    def test_named_month_with_time(self) -> None:
        """Test a trailing 12-hour time is dropped."""
        assert parse_date("Nov 4, 2017 2:30 PM") == NOV_4_2017

    def test_named_month_two_digit_year(self) -> None:
        """Test 2-digit years use the default century."""
        assert parse_date("Nov 4, 17") == NOV_4_2017

    def test_two_digit_year_is_not_windowed(self) -> None:
        """Test 2-digit years are added to the century, not rolled back."""
        assert parse_date("Nov 4, 99") == CalendarDate(2099, 308)
        opts = InferOptions(default_century=1900)
        assert parse_date("Nov 4, 99", opts) == CalendarDate(1999, 308)

    def test_unknown_month_name(self) -> None:
        """Test an unknown month name is a parse error."""
        with pytest.raises(ParseError, match="cannot determine format"):
            parse_date("Smarch 4, 2017")


class TestDateutilLayouts:
    """Tests for layouts handed to dateutil's parser."""

    @pytest.mark.parametrize(
        "text",
        [
            "2017-9-26",
            "20170926",
            "Tuesday, September 26, 2017",
            "Sep 26 2017 6pm",
            "2017-09-26 18:00:00 UTC",
            "26 Sep 2017 18:00 CEST",
        ],
    )
    def test_accepted(self, text: str) -> None:
        """Test forms outside the built-in layouts still parse."""
        assert parse_date(text) == CalendarDate(2017, 269)

    def test_date_order_is_passed_on(self) -> None:
        """Test DMY reads day first for dateutil layouts too."""
        assert parse_date("4/11/2017 6pm") == CalendarDate(2017, 101)
        opts = InferOptions(date_order=DateOrder.DMY)
        assert parse_date("4/11/2017 6pm", opts) == NOV_4_2017

    @pytest.mark.parametrize("text", ["September 2017", "Tuesday", "Sep 26"])
    def test_incomplete_date(self, text: str) -> None:
        """Test a date missing its year, month or day is rejected."""
        with pytest.raises(ParseError, match="incomplete date"):
            parse_date(text)


class TestTodayKeyword:
    """Tests for today/now."""

    def test_today_uses_reference(self, st_tibs_day: CalendarDate) -> None:
        """Test today resolves to the supplied reference date."""
        assert parse_date("today", today=st_tibs_day) == st_tibs_day
        assert parse_date("  NOW ", today=st_tibs_day) == st_tibs_day

    def test_today_defaults_to_system_date(self) -> None:
        """Test today without a reference uses the system clock."""
        assert parse_date("today") == CalendarDate.today()


class TestParseErrors:
    """Tests for rejected input."""

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty(self, text: str) -> None:
        """Test empty input raises ParseError."""
        with pytest.raises(ParseError, match="empty string"):
            parse_date(text)

    @pytest.mark.parametrize("text", ["next tuesday", "3 days ago", "14:30", "2017"])
    def test_unrecognised(self, text: str) -> None:
        """Test unsupported layouts raise ParseError."""
        with pytest.raises(ParseError):
            parse_date(text)

    def test_impossible_date(self) -> None:
        """Test a recognised layout with an invalid day raises ValidationError."""
        with pytest.raises(ValidationError, match="day must be between 1 and 28"):
            parse_date("2023-02-29")

    def test_impossible_month(self) -> None:
        """Test month 13 raises ValidationError."""
        with pytest.raises(ValidationError, match="month must be between 1 and 12"):
            parse_date("13/13/2017")
