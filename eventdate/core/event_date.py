"""
EventDate: one genealogical event date and everything derived from it.

The date is parsed when the object is created. Validation and formatting
run on the first query that needs them and are then kept for the life of
the object. Year, sort and day-number queries read the parsed fields
directly, so they still answer for a date that fails validation.
"""

import logging
from typing import Any, Dict, Optional

from .parsed_date import ParsedDate, SubDate
from .parser import ParseResult, parse_date
from .vocabulary import DateModifier, month_code
from ..utils.config import EngineConfig, default_config
from ..validation.date_editor import EditResult, edit_date, modifier_label
from ..validation.date_rules import (
    APPROXIMATE_DAY_TOLERANCE,
    APPROXIMATE_MONTH_TOLERANCE,
    APPROXIMATE_YEAR_TOLERANCE,
    DAYS_PER_YEAR,
    MONTH_LENGTHS,
    MONTH_OFFSETS,
    OPEN_ENDED_TOLERANCE,
    is_discrete_event,
)
from ..validation.errors import DateError

logger = logging.getLogger(__name__)


class EventDate:
    """A free-text event date such as "Abt 1850" or "Bet 10 and 15 Oct 1823".

    Example:
        >>> date = EventDate("bet 10 and 15 oct 1823")
        >>> date.format_date()
        'Bet 10 Oct 1823 and 15 Oct 1823'
        >>> date.earliest_year(), date.latest_year()
        (1823, 1823)
    """

    def __init__(self, date_text: Optional[str], event_type: Optional[str] = None,
                 config: Optional[EngineConfig] = None):
        """
        Args:
            date_text: The date as entered; None is treated as no date
            event_type: Event type name (e.g. 'Birth'); single-instant events
                do not allow "From ... to" ranges
            config: Engine configuration (defaults to default_config)
        """
        self._original = date_text if date_text is not None else ''
        self.event_type = event_type
        self.discrete = event_type is not None and is_discrete_event(event_type)
        self.config = config or default_config
        self._parse_result: ParseResult = parse_date(self._original)
        self._edit_result: Optional[EditResult] = None

    @property
    def original_text(self) -> str:
        """The date exactly as it was given."""
        return self._original

    @property
    def _parsed(self) -> ParsedDate:
        return self._parse_result.date

    def _edit(self) -> EditResult:
        """Validate and format the date once, then reuse the result."""
        if self._edit_result is None:
            if self._parse_result.ok:
                self._edit_result = edit_date(self._parsed, self.config.today(), self.discrete)
            else:
                self._edit_result = EditResult(
                    date=self._parsed,
                    error=self._parse_result.error,
                    error_message=self._parse_result.error_message,
                )
            if not self._edit_result.ok:
                logger.debug(f"Date {self._original!r} rejected: {self._edit_result.error_message}")
        return self._edit_result

    # Validation and formatting

    def format_date(self) -> str:
        """Return the canonical form, or the original text if the date has errors."""
        result = self._edit()
        return result.formatted if result.ok else self._original

    def formatted_date(self) -> str:
        """Return the canonical form, empty if the date has errors."""
        return self._edit().formatted

    def edit_ok(self) -> bool:
        return self._edit().ok

    def error(self) -> Optional[DateError]:
        return self._edit().error

    def error_message(self) -> Optional[str]:
        return self._edit().error_message

    def significant_reformat(self) -> bool:
        """Whether parsing changed the date enough that a person should review it."""
        return self._parse_result.significant_reformat

    # Years

    def earliest_year(self) -> Optional[int]:
        """Earliest year the date could mean; None for an open start (Bef, To)."""
        for sub_date in self._parsed.sub_dates():
            if sub_date.modifier is not None and sub_date.modifier.opens_lower_bound:
                continue
            if sub_date.effective_year is not None:
                return sub_date.year_num
        return None

    def latest_year(self) -> Optional[int]:
        """Latest year the date could mean; None for an open end (Aft, From)."""
        end = self._parsed.end
        if end.modifier is not None and end.modifier.opens_upper_bound:
            return None
        return end.year_num

    def year_only(self) -> Optional[str]:
        """Year of the (end) date as written, keeping split years ("1699/00")."""
        end = self._parsed.end
        if end.year is None:
            return None
        return _with_suffix(end.year, end)

    def year_range(self) -> Optional[str]:
        """Years of the date with their modifiers, e.g. "Bet 1850 & 1855".

        A range within one year shows that year once.
        """
        date = self._edit().date
        start, end = date.start, date.end
        if end.year is None:
            return None
        if start.year is not None and start.year == end.year and start.suffix == end.suffix:
            return _with_suffix(end.year, end)

        parts = []
        for sub_date in (start, end):
            if sub_date.modifier is not None:
                if sub_date.modifier == DateModifier.AND:
                    parts.append('&')
                else:
                    parts.append(modifier_label(sub_date.modifier, date.is_range))
            if sub_date.supplemental_modifier is not None:
                parts.append(sub_date.supplemental_modifier.value.lower())
            if sub_date.year is not None:
                parts.append(sub_date.year)
            if sub_date.suffix is not None:
                parts.append(sub_date.suffix)
        return ' '.join(parts)

    def effective_year(self) -> Optional[str]:
        """Signed end year, resolving split years (1624 for 1623/24)."""
        return self._parsed.end.effective_year

    def effective_start_year(self) -> Optional[str]:
        """Signed start year of a range, else the end year."""
        first = self._parsed.first_dated()
        return first.effective_year if first is not None else None

    # Sort keys

    def date_sort_key(self) -> int:
        """Return the date as a yyyymmdd integer for sorting (0 without a year).

        Missing month and day are 00. Bef/To move the key one unit (day,
        month or year, by precision) earlier and Aft/Bet/From one unit later.
        BC years are negative. A range sorts by its start date.
        """
        sub_date = self._parsed.first_dated()
        if sub_date is None:
            return 0

        year, month, day = sub_date.year_num, sub_date.month_num, sub_date.day_num
        key = year * 10000 + month * 100 + day
        modifier = sub_date.modifier
        if modifier is None:
            return key

        earlier = modifier.opens_lower_bound
        later = modifier.shifts_later

        if sub_date.month is not None and sub_date.day is not None:
            # Every February has 29 days here
            if earlier:
                if day == 1:
                    if month == 1:
                        key = (year - 1) * 10000 + 1231
                    else:
                        key = year * 10000 + (month - 1) * 100 + MONTH_LENGTHS[month_code(month - 1)]
                else:
                    key -= 1
            if later:
                if day == 31 or day == MONTH_LENGTHS[sub_date.month]:
                    if month == 12:
                        key = (year + 1) * 10000 + 101
                    else:
                        key = year * 10000 + (month + 1) * 100 + 1
                else:
                    key += 1
            return key

        if sub_date.month is not None:
            if earlier:
                key = (year - 1) * 10000 + 1200 if month == 1 else key - 100
            if later:
                key = (year + 1) * 10000 + 100 if month == 12 else key + 100
            return key

        if earlier:
            key -= 10000
        if later:
            key += 10000
        return key

    def date_string_key(self) -> str:
        """Return the start (or only) date as a zero-padded yyyy[mm[dd]] string.

        Modifiers are ignored. Empty for BC dates and dates without a year.
        """
        sub_date = self._parsed.first_dated()
        if sub_date is None or sub_date.is_bc:
            return ''
        key = f"{sub_date.year_num:04d}"
        if sub_date.month is not None:
            key += f"{sub_date.month_num:02d}"
        if sub_date.day is not None:
            key += f"{sub_date.day_num:02d}"
        return key

    def iso_date(self) -> str:
        """Return date_string_key() as yyyy[-mm[-dd]]."""
        key = self.date_string_key()
        if not key:
            return ''
        iso = key[:4]
        if len(key) >= 6:
            iso += f"-{key[4:6]}"
        if len(key) == 8:
            iso += f"-{key[6:8]}"
        return iso

    # Fuzzy day bounds

    def min_day(self) -> int:
        """Earliest day number the date could mean, for comparing two dates.

        Uses the start of a range and the first day of an imprecise period.
        Bef subtracts ten years; Abt and Est subtract 10 days, 91 days or a
        year depending on precision. Leap years are ignored. 0 without a year.
        """
        sub_date = self._parsed.first_dated()
        if sub_date is None:
            return 0

        day_number = sub_date.year_num * DAYS_PER_YEAR
        if sub_date.month is not None:
            day_number += MONTH_OFFSETS[sub_date.month_num]
            day_number += sub_date.day_num if sub_date.day is not None else 1
        else:
            day_number += 1

        if sub_date.modifier == DateModifier.BEFORE:
            return day_number - OPEN_ENDED_TOLERANCE
        if sub_date.modifier is not None and sub_date.modifier.is_approximate:
            return day_number - _approximate_tolerance(sub_date)
        return day_number

    def max_day(self) -> int:
        """Latest day number the date could mean, for comparing two dates.

        Uses the end of a range and the last day of an imprecise period.
        Aft adds ten years; Abt and Est add 10 days, 91 days or a year
        depending on precision. Leap years are ignored. 0 without a year.
        """
        end = self._parsed.end
        if end.effective_year is None:
            return 0

        day_number = end.year_num * DAYS_PER_YEAR
        if end.month is None:
            day_number += DAYS_PER_YEAR
        elif end.day is None:
            day_number += MONTH_OFFSETS[end.month_num + 1]
        else:
            day_number += MONTH_OFFSETS[end.month_num] + end.day_num

        if end.modifier == DateModifier.AFTER:
            return day_number + OPEN_ENDED_TOLERANCE
        if end.modifier is not None and end.modifier.is_approximate:
            return day_number + _approximate_tolerance(end)
        return day_number

    # Display

    def parsed_components(self) -> Dict[str, Any]:
        """Return the edited fields for building a localized display of the date."""
        date = self._edit().date

        def components(sub_date: SubDate) -> Dict[str, Optional[str]]:
            return {
                'year': sub_date.year,
                'month': sub_date.month,
                'day': sub_date.day,
                'modifier': (modifier_label(sub_date.modifier, date.is_range)
                             if sub_date.modifier is not None else None),
                'suffix': sub_date.suffix,
            }

        return {
            'start': components(date.start),
            'end': components(date.end),
            'text': date.text,
        }

    def __str__(self) -> str:
        return self.format_date()

    def __repr__(self) -> str:
        return f"EventDate({self._original!r}, event_type={self.event_type!r})"


def _with_suffix(year: str, sub_date: SubDate) -> str:
    return f"{year} {sub_date.suffix}" if sub_date.suffix else year


def _approximate_tolerance(sub_date: SubDate) -> int:
    if sub_date.day is not None:
        return APPROXIMATE_DAY_TOLERANCE
    if sub_date.month is not None:
        return APPROXIMATE_MONTH_TOLERANCE
    return APPROXIMATE_YEAR_TOLERANCE
