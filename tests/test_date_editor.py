"""Tests for validating and formatting parsed dates."""

from datetime import date

import pytest
from eventdate.core.parser import parse_date
from eventdate.core.vocabulary import DateModifier
from eventdate.validation import DateError, edit_date

TODAY = date(2024, 6, 15)


def edit(text, discrete=False):
    """Parse and edit a date that parses cleanly."""
    parsed = parse_date(text)
    assert parsed.ok, parsed.error_message
    return edit_date(parsed.date, TODAY, discrete)


class TestFormatting:
    """Tests for the canonical form."""

    @pytest.mark.parametrize("text,expected", [
        ("15 jan 1850", "15 Jan 1850"),
        ("abt 10 oct 1850", "Abt 10 Oct 1850"),
        ("ABOUT OCT 1850", "Abt Oct 1850"),
        ("circa 1850", "Est 1850"),
        ("bef abt 1850", "Bef abt 1850"),
        ("to 1850", "To 1850"),
        ("from 1850 to 1860", "From 1850 to 1860"),
        ("1850 to 1860", "From 1850 to 1860"),
        ("bet 1850 and 1855", "Bet 1850 and 1855"),
        ("bet 10 and 15 oct 1823", "Bet 10 Oct 1823 and 15 Oct 1823"),
        ("bet jan and mar 1850", "Bet Jan 1850 and Mar 1850"),
        ("1699/00", "1699/00"),
        ("10 feb 1699/00", "10 Feb 1699/00"),
        ("100 bc", "100 BC"),
        ("abt 1850 (approx)", "Abt 1850 (approx)"),
        ("in infancy", "(in infancy)"),
        ("", ""),
    ])
    def test_format(self, text, expected):
        """Test the canonical form of valid dates."""
        result = edit(text)
        assert result.ok
        assert result.error_message is None
        assert result.formatted == expected

    def test_discrete_event_range(self):
        """Test that From/to becomes Bet/and for a discrete event."""
        result = edit("from 1850 to 1860", discrete=True)
        assert result.formatted == "Bet 1850 and 1860"
        assert result.date.start.modifier == DateModifier.BETWEEN
        assert result.date.end.modifier == DateModifier.AND

    def test_non_discrete_event_range(self):
        """Test that From/to is kept otherwise."""
        assert edit("from 1850 to 1860").formatted == "From 1850 to 1860"


class TestModifierErrors:
    """Tests for modifier combinations."""

    @pytest.mark.parametrize("text,error", [
        ("bet 1850", DateError.INCORRECT_BET_AND_USAGE),
        ("and 1850", DateError.INCORRECT_BET_AND_USAGE),
        ("abt 1850 and 1860", DateError.INVALID_COMBINATION_OF_MODIFIERS),
        ("from 1850 and 1860", DateError.INVALID_COMBINATION_OF_MODIFIERS),
        ("bef bef 1850", DateError.INVALID_COMBINATION_OF_MODIFIERS),
        ("est abt 1850", DateError.INVALID_COMBINATION_OF_MODIFIERS),
        ("abt bef 1850", DateError.MODIFIER_ORDER_NOT_SUPPORTED),
    ])
    def test_error(self, text, error):
        """Test each invalid modifier combination."""
        result = edit(text)
        assert not result.ok
        assert result.error == error
        assert result.formatted == ''


class TestSubDateErrors:
    """Tests for errors within one sub-date."""

    def test_invalid_day_for_month(self):
        """Test day 30 in February."""
        result = edit("30 feb 1900")
        assert result.error == DateError.INVALID_DAY_FOR_MONTH
        assert result.error_message == "Invalid day for Feb"

    def test_invalid_day_for_short_month(self):
        """Test day 31 in a 30-day month."""
        assert edit("31 apr 1900").error_message == "Invalid day for Apr"

    def test_leap_day_accepted(self):
        """Test that 29 Feb is accepted in any year."""
        assert edit("29 feb 1900").ok

    def test_incomplete_date(self):
        """Test a modifier without a year."""
        assert edit("abt jan").error == DateError.INCOMPLETE_DATE

    def test_split_year_after_march(self):
        """Test that split years are only for Jan-Mar."""
        result = edit("10 apr 1699/00")
        assert result.error == DateError.SPLIT_YEAR_WRONG_MONTH
        assert result.error_message == "Split year valid only for Jan-Mar"


class TestRangeErrors:
    """Tests for range ordering."""

    @pytest.mark.parametrize("text", [
        "bet 1860 and 1850",
        "bet 1850 and 1850",
        "bet mar 1850 and jan 1850",
        "bet jan 1850 and 1850",
        "bet 15 oct 1823 and 10 oct 1823",
        "bet oct 1823 and 10 oct 1823",
    ])
    def test_invalid_range(self, text):
        """Test ranges that do not run forwards."""
        assert edit(text).error == DateError.INVALID_DATE_RANGE

    @pytest.mark.parametrize("text", [
        "bet 1850 and 1851",
        "bet jan 1850 and feb 1850",
        "bet 9 oct 1823 and 10 oct 1823",
    ])
    def test_valid_range(self, text):
        """Test ranges that run forwards."""
        assert edit(text).ok


class TestFutureDates:
    """Tests for the future date check."""

    @pytest.mark.parametrize("text", [
        "2025",
        "jul 2024",
        "16 jun 2024",
        "bet 2020 and 2025",
    ])
    def test_future(self, text):
        """Test dates after today."""
        result = edit(text)
        assert result.error == DateError.FUTURE_DATE
        assert result.error_message == "Future date"

    @pytest.mark.parametrize("text", ["2024", "jun 2024", "15 jun 2024"])
    def test_today_is_not_future(self, text):
        """Test dates that include today."""
        assert edit(text).ok
