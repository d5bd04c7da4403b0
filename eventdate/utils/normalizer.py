"""
Rewriting of embedded numeric dates and other shorthand into GEDCOM word form.

Input is a date that has already been trimmed, lower-cased and had any trailing
parenthetical note removed. The passes turn "1850-01-15", "15/01/1850" and
"15-jan-1850" into "15 jan 1850", and "1850-1860" into "from 1850 to 1860",
so the lexer only ever sees day/month-word/year fields.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional

from ..core.parsed_date import ParsedDate, SubDate
from ..core.vocabulary import month_code
from ..validation.date_rules import is_day, is_month_number
from ..validation.errors import DateError, DateParseError

logger = logging.getLogger(__name__)

# Only the first two embedded dates of each kind are converted
MAX_EMBEDDED_DATES = 2

ISO_DATE_RE = re.compile(r'(\d{3,4})[-./](\d{1,2})[-./](\d{1,2})')
NUMERIC_DATE_RE = re.compile(r'(\d{1,2})[-./](\d{1,2})[-./](\d{3,4})')
DASHED_DATE_RE = re.compile(r'\d{1,2}-[a-z]+-\d{3,4}')
UNCERTAIN_SPLIT_YEAR_RE = re.compile(r'\[/\d{1,2}\?\]')

WFT_ESTIMATE = 'wft est'
RANGE_WORDS = ('bet', 'btw', 'between')
FROM_WORDS = ('from', 'frm')


@dataclass(slots=True)
class NormalizedDate:
    """Result of normalizing a date string.

    Attributes:
        text: The rewritten date
        significant_reformat: True if the rewrite changed how the date reads
            (worth a user's review)
        save_original: True if the original text should be kept alongside the
            parsed date (uncertain split years)
    """
    text: str
    significant_reformat: bool = False
    save_original: bool = False


def _format_date(day: str, month: int, year: str) -> str:
    return f"{day} {month_code(month).lower()} {year}"


def _replace_embedded(
    text: str,
    pattern: re.Pattern,
    convert: Callable[[re.Match], Optional[str]]
) -> str:
    """Replace up to two matches of ``pattern`` with ``convert(match)``.

    ``convert`` returns None to leave a match as it is. Replacement runs from
    the last match backwards so earlier offsets stay valid.
    """
    replacements: List[tuple] = []
    for match in pattern.finditer(text):
        if len(replacements) == MAX_EMBEDDED_DATES:
            break
        replacements.append((match, convert(match)))

    for match, new in reversed(replacements):
        if new is not None:
            text = text[:match.start()] + new + text[match.end():]
    return text


class DateNormalizer:
    """Normalizes one date string; holds the flags collected along the way."""

    def __init__(self, text: str):
        self.text = text
        self.significant_reformat = False
        self.save_original = False

    def normalize(self) -> NormalizedDate:
        """Run every pass in order.

        Raises:
            DateParseError: WFT estimate, or an ambiguous numeric date
                (carrying the recovered year)
        """
        if WFT_ESTIMATE in self.text:
            raise DateParseError(DateError.WFT_NOT_ACCEPTED)

        self.text = _replace_embedded(self.text, ISO_DATE_RE, self._convert_iso)
        self.text = _replace_embedded(self.text, NUMERIC_DATE_RE, self._convert_numeric)
        self.text = _replace_embedded(
            self.text, DASHED_DATE_RE, lambda m: m.group().replace('-', ' ')
        )
        self._strip_uncertain_split_years()
        self._convert_dash_ranges()
        self._convert_bc()

        if self.significant_reformat:
            logger.debug(f"Date rewritten to {self.text!r}")
        return NormalizedDate(self.text, self.significant_reformat, self.save_original)

    def _convert_iso(self, match: re.Match) -> Optional[str]:
        """yyyy-mm-dd (or yyyy-dd-mm when only that reading works)."""
        year, middle, last = match.groups()
        if is_month_number(int(middle)) and is_day(int(last)):
            self.significant_reformat = True
            return _format_date(last, int(middle), year)
        if is_day(int(middle)) and is_month_number(int(last)):
            self.significant_reformat = True
            return _format_date(middle, int(last), year)
        return None

    def _convert_numeric(self, match: re.Match) -> Optional[str]:
        """dd-mm-yyyy or mm-dd-yyyy, only when the order can be told apart."""
        first, second, year = match.groups()
        first_num, second_num = int(first), int(second)

        if not is_month_number(first_num) and is_month_number(second_num):
            self.significant_reformat = True
            return _format_date(first, second_num, year)
        if not is_month_number(second_num) and is_month_number(first_num):
            self.significant_reformat = True
            return _format_date(second, first_num, year)
        if first_num == second_num and is_month_number(first_num):
            self.significant_reformat = True
            return _format_date(second, first_num, year)

        # Ranges of numeric dates are rare, so the year goes in the end date
        recovered = ParsedDate(end=SubDate(year=year, effective_year=year))
        raise DateParseError(DateError.AMBIGUOUS_DATE, partial=recovered)

    def _strip_uncertain_split_years(self) -> None:
        """Read "1699[/00?]" as "1699[/00]" and keep the original as a note."""
        def drop_question_mark(match: re.Match) -> str:
            self.save_original = True
            self.significant_reformat = True
            return match.group().replace('?', '')

        self.text = UNCERTAIN_SPLIT_YEAR_RE.sub(drop_question_mark, self.text)

    def _convert_dash_ranges(self) -> None:
        """Turn "bet 1850-1860" into "bet 1850 and 1860", "1850-1860" into "from 1850 to 1860"."""
        if '-' not in self.text:
            return
        if any(word in self.text for word in RANGE_WORDS):
            self.text = self.text.replace('-', ' and ')
        else:
            self.text = self.text.replace('-', ' to ')
            if not any(word in self.text for word in FROM_WORDS):
                self.text = 'from ' + self.text
        self.significant_reformat = True

    def _convert_bc(self) -> None:
        # A leading "b.c." is more likely "bef circa" than an era
        if 'b.c.' in self.text:
            self.text = self.text[:1] + self.text[1:].replace('b.c.', 'bc')
            self.significant_reformat = True


def normalize_date(text: str) -> NormalizedDate:
    """Normalize a lower-cased date string.

    Args:
        text: Date text, lower case, whitespace collapsed, no trailing note

    Returns:
        NormalizedDate with the rewritten text and reformat flags

    Raises:
        DateParseError: If the date is a WFT estimate or an ambiguous
            numeric date
    """
    return DateNormalizer(text).normalize()
