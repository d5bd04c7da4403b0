"""Tests for the multi-language date vocabulary."""

import pytest
from eventdate.core.vocabulary import (
    DateModifier,
    MONTH_CODES,
    NOTE_DATES,
    UNKNOWN_DATES,
    lookup_modifier,
    lookup_month,
    month_code,
    month_number,
)


class TestMonths:
    """Tests for month lookup."""

    @pytest.mark.parametrize("word,expected", [
        ('jan', 'Jan'),
        ('january', 'Jan'),
        ('janvier', 'Jan'),
        ('märz', 'Mar'),
        ('maerz', 'Mar'),
        ('mrt', 'Mar'),
        ('mei', 'May'),
        ('août', 'Aug'),
        ('setembro', 'Sep'),
        ('okt', 'Oct'),
        ('desember', 'Dec'),
    ])
    def test_lookup_month(self, word, expected):
        """Test month names in several languages."""
        assert lookup_month(word) == expected

    def test_lookup_unknown_word(self):
        """Test that non-month words are not matched."""
        assert lookup_month('spring') is None
        assert lookup_month('Jan') is None  # lookup expects lower case

    def test_month_numbers(self):
        """Test conversion between codes and numbers."""
        assert len(MONTH_CODES) == 12
        assert month_number('Jan') == 1
        assert month_number('Dec') == 12
        assert month_number(None) == 0
        assert month_code(3) == 'Mar'


class TestModifiers:
    """Tests for modifier lookup."""

    @pytest.mark.parametrize("word,expected", [
        ('abt', DateModifier.ABOUT),
        ('vers', DateModifier.ABOUT),
        ('omstreeks', DateModifier.ABOUT),
        ('circa', DateModifier.ESTIMATED),
        ('c', DateModifier.ESTIMATED),
        ('calc', DateModifier.CALCULATED),
        ('voor', DateModifier.BEFORE),
        ('avant', DateModifier.BEFORE),
        ('etter', DateModifier.AFTER),
        ('van', DateModifier.FROM),
        ('until', DateModifier.TO),
        ('btw', DateModifier.BETWEEN),
        ('&', DateModifier.AND),
        ('interpreted', DateModifier.INTERPRETED),
    ])
    def test_lookup_modifier(self, word, expected):
        """Test modifier words in several languages."""
        assert lookup_modifier(word) == expected

    def test_canonical_spelling(self):
        """Test the canonical spelling carried by each modifier."""
        assert DateModifier.ABOUT.value == 'Abt'
        assert DateModifier.TO.value == 'to'
        assert DateModifier.AND.value == 'and'

    def test_supplemental_modifiers(self):
        """Test which modifiers may follow another modifier."""
        assert DateModifier.ABOUT.is_supplemental
        assert DateModifier.CALCULATED.is_supplemental
        assert DateModifier.ESTIMATED.is_supplemental
        assert not DateModifier.BEFORE.is_supplemental
        assert not DateModifier.BETWEEN.is_supplemental

    def test_bound_properties(self):
        """Test open-ended and approximate modifier groups."""
        assert DateModifier.BEFORE.opens_lower_bound
        assert DateModifier.TO.opens_lower_bound
        assert DateModifier.AFTER.opens_upper_bound
        assert DateModifier.FROM.opens_upper_bound
        assert DateModifier.BETWEEN.shifts_later
        assert not DateModifier.AND.shifts_later
        assert DateModifier.ESTIMATED.is_approximate
        assert not DateModifier.CALCULATED.is_approximate


def test_special_dates():
    """Test whole-string inputs that mean no date or a note."""
    assert 'unknown' in UNKNOWN_DATES
    assert 'onbekend' in UNKNOWN_DATES
    assert NOTE_DATES['died in infancy'] == '(in infancy)'
    assert NOTE_DATES['died young'] == '(young)'
