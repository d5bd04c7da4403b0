"""
Validation and canonical formatting of parsed event dates.

Editing checks what parsing cannot see field by field: whether the modifiers
pair up, whether each day fits its month, whether a range runs forwards and
whether the date lies in the future. On success it renders the date in
canonical GEDCOM-style form, e.g. "Bet 10 Oct 1823 and 15 Oct 1823".
"""

from dataclasses import dataclass, replace
from datetime import date
from typing import List, Optional

from ..core.parsed_date import ParsedDate, SubDate
from ..core.vocabulary import DateModifier
from .date_rules import MONTH_LENGTHS, SPLIT_YEAR_MONTHS
from .errors import DateError, DateParseError

# Modifier pairs a two-date range may use, as (start, end)
RANGE_PAIRS = (
    (DateModifier.BETWEEN, DateModifier.AND),
    (DateModifier.FROM, DateModifier.TO),
)


@dataclass(frozen=True, slots=True)
class EditResult:
    """Outcome of editing a parsed date.

    ``date`` is the date as edited (From/to may have become Bet/and for a
    discrete event). ``formatted`` is empty when the edit failed.
    """
    date: ParsedDate
    formatted: str = ''
    error: Optional[DateError] = None
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def modifier_label(modifier: DateModifier, paired: bool) -> str:
    """Return the display form of a modifier.

    "to" is lower case inside "From ... to ..." but starts the date on its own.
    """
    if modifier == DateModifier.TO and not paired:
        return 'To'
    return modifier.value


def format_sub_date(sub_date: SubDate, paired: bool) -> str:
    """Render one sub-date, e.g. "Bef abt 10 Oct 1850"."""
    parts = [
        modifier_label(sub_date.modifier, paired) if sub_date.modifier else None,
        sub_date.supplemental_modifier.value.lower() if sub_date.supplemental_modifier else None,
        sub_date.day,
        sub_date.month,
        sub_date.year,
        sub_date.suffix,
    ]
    return ' '.join(part for part in parts if part is not None)


class DateEditor:
    """Validates and formats one parsed date."""

    def __init__(self, parsed: ParsedDate, discrete: bool = False):
        """
        Args:
            parsed: Date produced by the parser without errors
            discrete: Whether the event happens at a single instant
        """
        self.parsed = parsed
        self.discrete = discrete

    def edit(self, today: date) -> EditResult:
        """Validate the date and render it.

        Args:
            today: Current date in the reference time zone

        Returns:
            EditResult with the canonical string or the first error found
        """
        try:
            parsed = self._check_modifiers(self.parsed)
            formatted = self._format(parsed)
            self._check_range(parsed)
            self._check_not_future(parsed, today)
        except DateParseError as e:
            return EditResult(
                date=e.partial if e.partial is not None else self.parsed,
                error=e.error,
                error_message=e.message,
            )

        if parsed.text:
            formatted = f"{formatted} {parsed.text}" if formatted else parsed.text
        return EditResult(date=parsed, formatted=formatted)

    def _check_modifiers(self, parsed: ParsedDate) -> ParsedDate:
        start, end = parsed.start, parsed.end
        if parsed.is_range:
            if (start.modifier, end.modifier) not in RANGE_PAIRS:
                raise DateParseError(DateError.INVALID_COMBINATION_OF_MODIFIERS, partial=parsed)
            # A discrete event cannot last, so From/to really means Bet/and
            if self.discrete and start.modifier == DateModifier.FROM:
                return replace(
                    parsed,
                    start=replace(start, modifier=DateModifier.BETWEEN),
                    end=replace(end, modifier=DateModifier.AND),
                )
        elif end.modifier in (DateModifier.BETWEEN, DateModifier.AND):
            raise DateParseError(DateError.INCORRECT_BET_AND_USAGE, partial=parsed)
        return parsed

    def _format(self, parsed: ParsedDate) -> str:
        formatted: List[str] = []
        for sub_date in parsed.sub_dates():
            if sub_date.is_empty():
                continue
            self._check_sub_date(sub_date, parsed)
            formatted.append(format_sub_date(sub_date, parsed.is_range))
        return ' '.join(formatted)

    def _check_sub_date(self, sub_date: SubDate, parsed: ParsedDate) -> None:
        if sub_date.year is None or (sub_date.day is not None and sub_date.month is None):
            raise DateParseError(DateError.INCOMPLETE_DATE, partial=parsed)

        if sub_date.day is not None and sub_date.day_num > MONTH_LENGTHS[sub_date.month]:
            raise DateParseError(DateError.INVALID_DAY_FOR_MONTH, partial=parsed, month=sub_date.month)

        if ('/' in sub_date.year and sub_date.month is not None
                and sub_date.month not in SPLIT_YEAR_MONTHS):
            raise DateParseError(DateError.SPLIT_YEAR_WRONG_MONTH, partial=parsed)

        supplemental = sub_date.supplemental_modifier
        if supplemental is not None:
            main_is_supplemental = sub_date.modifier is not None and sub_date.modifier.is_supplemental
            if not supplemental.is_supplemental and main_is_supplemental:
                raise DateParseError(DateError.MODIFIER_ORDER_NOT_SUPPORTED, partial=parsed)
            if not supplemental.is_supplemental or main_is_supplemental:
                raise DateParseError(DateError.INVALID_COMBINATION_OF_MODIFIERS, partial=parsed)

    def _check_range(self, parsed: ParsedDate) -> None:
        """Reject a range whose start is not before its end.

        Equal years need both months, and equal months need both days, for
        the order to be known.
        """
        start, end = parsed.start, parsed.end
        if start.effective_year is None:
            return
        start_year, end_year = start.year_num, end.year_num
        if start_year > end_year:
            invalid = True
        elif start_year < end_year:
            invalid = False
        elif start.month is None or end.month is None or start.month_num > end.month_num:
            invalid = True
        elif start.month_num < end.month_num:
            invalid = False
        else:
            invalid = start.day is None or end.day is None or start.day_num > end.day_num
        if invalid:
            raise DateParseError(DateError.INVALID_DATE_RANGE, partial=parsed)

    def _check_not_future(self, parsed: ParsedDate, today: date) -> None:
        for sub_date in (parsed.end, parsed.start):
            year = sub_date.year_num
            if year is None:
                continue
            if (year > today.year
                    or (sub_date.month is not None and year == today.year
                        and sub_date.month_num > today.month)
                    or (sub_date.day is not None and year == today.year
                        and sub_date.month_num == today.month and sub_date.day_num > today.day)):
                raise DateParseError(DateError.FUTURE_DATE, partial=parsed)


def edit_date(parsed: ParsedDate, today: date, discrete: bool = False) -> EditResult:
    """Validate and format a parsed date.

    Args:
        parsed: Date produced by the parser without errors
        today: Current date in the reference time zone
        discrete: Whether the event happens at a single instant

    Returns:
        EditResult with the canonical string or the first error found
    """
    return DateEditor(parsed, discrete).edit(today)
