"""
Classification of date fields into modifiers, days, months and years.

Fields are read from last to first. GEDCOM modifiers and ranges are written
as prefixes ("Bet 1850 and 1855"), so reading backwards means the first
number met is always a year, and each modifier closes the date it precedes.
The end date is filled first; a second modifier moves on to the start date.
"""

from dataclasses import dataclass
from typing import List, NoReturn, Optional

from .parsed_date import ParsedDate, SubDate
from .vocabulary import (
    DateModifier,
    ERA_SUFFIXES,
    ORDINAL_SUFFIXES,
    lookup_modifier,
    lookup_month,
    month_number,
)
from ..utils.lexer import is_numeric
from ..validation.date_rules import (
    MAX_YEAR_RANGE,
    is_day,
    is_double_dating_year,
    is_year,
)
from ..validation.errors import DateError, DateParseError


END, START = 0, 1
MAX_SUB_DATES = 2


def join_notes(first: str, rest: Optional[str]) -> str:
    """Put a note in front of any existing preserved text."""
    return first + (f" {rest}" if rest else "")


@dataclass(slots=True)
class _SlotBuilder:
    """Mutable counterpart of SubDate used while reading fields."""
    modifier: Optional[DateModifier] = None
    supplemental_modifier: Optional[DateModifier] = None
    day: Optional[str] = None
    month: Optional[str] = None
    year: Optional[str] = None
    effective_year: Optional[str] = None
    suffix: Optional[str] = None

    def set_year(self, year: str) -> None:
        self.year = year
        self.effective_year = year

    def freeze(self) -> SubDate:
        return SubDate(
            modifier=self.modifier,
            supplemental_modifier=self.supplemental_modifier,
            day=self.day,
            month=self.month,
            year=self.year,
            effective_year=self.effective_year,
            suffix=self.suffix,
        )


class FieldClassifier:
    """Assigns the fields of one date to the end and start sub-dates."""

    def __init__(self, fields: List[str], text: Optional[str] = None):
        """
        Args:
            fields: Fields from the lexer, in reading order
            text: Preserved note (parenthetical text) found before lexing
        """
        self.fields = fields
        self.text = text
        self.significant_reformat = False
        self._slots = [_SlotBuilder(), _SlotBuilder()]
        self._slot_index = END
        self._awaiting_split_year = False   # "/" seen, first half still to come
        self._pending_zero = False          # "0" seen, may be the "00" of a split year

    @property
    def _end(self) -> _SlotBuilder:
        return self._slots[END]

    @property
    def _start(self) -> _SlotBuilder:
        return self._slots[START]

    def snapshot(self) -> ParsedDate:
        """Return what has been classified so far as a ParsedDate."""
        return ParsedDate(end=self._end.freeze(), start=self._start.freeze(), text=self.text)

    def _fail(self, error: DateError, **details) -> NoReturn:
        raise DateParseError(error, partial=self.snapshot(), **details)

    def classify(self) -> ParsedDate:
        """Classify every field.

        Returns:
            The parsed date, with BC years already made negative

        Raises:
            DateParseError: On the first field that cannot be placed. The
                error carries the fields classified up to that point.
        """
        position = len(self.fields) - 1
        while position >= 0 and self._slot_index < MAX_SUB_DATES:
            self._classify_field(position)
            position -= 1

        if self._awaiting_split_year:
            self._fail(DateError.INCOMPLETE_SPLIT_YEAR)

        self._borrow_start_year()
        self._add_missing_from()
        self._apply_era()
        return self.snapshot()

    def _classify_field(self, position: int) -> None:
        field = self.fields[position]
        slot = self._slots[self._slot_index]

        if field == '/':
            self._start_split_year(slot)
            return

        if self._awaiting_split_year:
            if not is_numeric(field):
                self._fail(DateError.INCOMPLETE_SPLIT_YEAR)
            self._complete_split_year(field, slot)
            self._awaiting_split_year = False
            return

        if field in ERA_SUFFIXES:
            slot.suffix = 'BC'
            return

        if is_numeric(field):
            self._classify_number(position, int(field), slot)
            return

        month = lookup_month(field)
        if month is not None:
            if slot.month is not None:
                self._fail(DateError.TOO_MANY_MONTHS)
            slot.month = month
            return

        modifier = lookup_modifier(field)
        if modifier is not None:
            self._classify_modifier(position, modifier, slot)
            return

        if field == '?':
            # Too important to drop
            self.text = join_notes('(?)', self.text)
        elif field in ORDINAL_SUFFIXES:
            pass
        elif 'wft' in field:
            self._fail(DateError.WFT_NOT_ACCEPTED)
        else:
            self._fail(DateError.UNRECOGNIZED_TEXT)

    def _classify_modifier(self, position: int, modifier: DateModifier, slot: _SlotBuilder) -> None:
        # Two modifiers in a row: the later one qualifies the earlier ("Bef abt")
        if position > 0 and lookup_modifier(self.fields[position - 1]) is not None:
            slot.supplemental_modifier = modifier
        else:
            slot.modifier = modifier
            self._slot_index += 1
        if self._slot_index >= MAX_SUB_DATES and position > 0:
            self._fail(DateError.TOO_MANY_PARTS)

    def _classify_number(self, position: int, number: int, slot: _SlotBuilder) -> None:
        if number == 0 and slot.year is None:
            self._pending_zero = True
            return

        if not is_day(number):
            if slot.year is not None:
                self._fail(DateError.INVALID_DAY_NUMBER)
            if not is_year(number):
                self._fail(DateError.INVALID_YEAR_NUMBER)
            slot.set_year(str(number))
            return

        # Could be a day or a year
        if slot.month is not None or slot.year is not None:
            if slot.day is not None:
                self._fail(DateError.TOO_MANY_NUMBERS)
            slot.day = str(number)
            return

        if self._may_borrow_from_end(position):
            self._borrow_day(number)
            return

        slot.set_year(str(number))

    def _may_borrow_from_end(self, position: int) -> bool:
        """Check if a bare day-sized number in the start date can share the end's month.

        "Bet 10 and 15 Oct 1823" means "Bet 10 Oct 1823 and 15 Oct 1823".
        Not when the number is the second half of a split year, and not when
        the end year has fewer than four digits (a range of early years).
        """
        after_split = position > 0 and self.fields[position - 1] == '/'
        return (
            not after_split
            and self._slot_index == START
            and self._start.year is None
            and self._end.year is not None
            and len(self._end.year) > 3
        )

    def _borrow_day(self, number: int) -> None:
        end, start = self._end, self._start
        if end.day is not None and number < int(end.day):
            start.year = end.year
            start.effective_year = end.effective_year
            start.month = end.month
            start.day = str(number)
            self.significant_reformat = True
        elif int(end.effective_year) - number < MAX_YEAR_RANGE:
            start.set_year(str(number))
        else:
            self._fail(DateError.MISSING_MONTH)

    def _start_split_year(self, slot: _SlotBuilder) -> None:
        if slot.year is None and not self._pending_zero:
            self._fail(DateError.INCOMPLETE_SPLIT_YEAR)
        # A "/" after a split year, month or day may mean "or" between two dates
        if (slot.year is not None and '/' in slot.year) or slot.month is not None or slot.day is not None:
            self._fail(DateError.INVALID_DATE_FORMAT)
        self._awaiting_split_year = True
        if self._pending_zero:
            slot.year = '0'
            self._pending_zero = False

    def _complete_split_year(self, first_part: str, slot: _SlotBuilder) -> None:
        """Combine the first half with the captured second half ("1699" + "00").

        On failure the first half is kept as the year, the closest thing to a
        year that later queries can use.
        """
        first_year = int(first_part)
        second_part = slot.year

        if not is_double_dating_year(first_year):
            slot.set_year(first_part)
            self._fail(DateError.SPLIT_YEAR_NOT_VALID_FOR_YEAR)

        # Second half written with fewer digits borrows the leading ones
        keep = max(len(first_part) - len(second_part), 0)
        second_year = int(first_part[:keep] + second_part)
        century_rollover = first_part[3:] == '9' and second_part[-1:] == '0'

        if second_year - 1 != first_year and not century_rollover:
            slot.set_year(first_part)
            self._fail(DateError.INVALID_SPLIT_YEAR)

        tail = first_part[2:]
        following = '00' if tail == '99' else f"{int(tail) + 1:02d}"
        slot.year = f"{first_part}/{following}"
        slot.effective_year = str(first_year + 1)

    def _borrow_start_year(self) -> None:
        """Give a year-less start date the end date's year ("Bet Jan and Mar 1850")."""
        if self._slot_index < MAX_SUB_DATES:
            return
        start, end = self._start, self._end
        if (start.year is None and end.year is not None
                and start.month is not None and end.month is not None
                and month_number(start.month) < month_number(end.month)):
            start.year = end.year
            start.effective_year = end.effective_year
            self.significant_reformat = True

    def _add_missing_from(self) -> None:
        """Read "1850 to 1860" as "From 1850 to 1860"."""
        if (self._start.year is not None and self._start.modifier is None
                and self._end.modifier == DateModifier.TO):
            self._start.modifier = DateModifier.FROM
            self.significant_reformat = True

    def _apply_era(self) -> None:
        for slot in self._slots:
            if slot.suffix == 'BC' and slot.effective_year is not None:
                slot.effective_year = f"-{slot.effective_year}"
