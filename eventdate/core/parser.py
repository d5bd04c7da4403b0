"""Parsing of an event date string into a ParsedDate."""

import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .classifier import FieldClassifier, join_notes
from .parsed_date import ParsedDate
from .vocabulary import NOTE_DATES, UNKNOWN_DATES
from ..utils.lexer import split_fields
from ..utils.normalizer import DateNormalizer
from ..validation.errors import DateError, DateParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of parsing one date.

    ``date`` is always set: on failure it holds whatever could be recovered
    (typically the year), which year and sort queries still use.
    """
    date: ParsedDate
    significant_reformat: bool = False
    error: Optional[DateError] = None
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def split_note(original: str) -> Tuple[str, Optional[str]]:
    """Separate a trailing parenthetical note from the date.

    Returns:
        Tuple of (date without the note, note including its opening
        parenthesis or None)
    """
    if '(' in original and original.strip().endswith(')'):
        date_part, note = original.split('(', 1)
        return date_part.strip(), '(' + note.strip()
    return original.strip(), None


def parse_date(original: str) -> ParseResult:
    """Parse an event date.

    Args:
        original: The date as entered, e.g. "abt 10 Oct 1850 (approx)"

    Returns:
        ParseResult with the parsed date or the error found
    """
    date_part, note = split_note(original)
    text = ' '.join(date_part.lower().split())

    if not text or text in UNKNOWN_DATES:
        return ParseResult(ParsedDate(text=note))
    if text in NOTE_DATES:
        return ParseResult(ParsedDate(text=join_notes(NOTE_DATES[text], note)))

    normalizer = DateNormalizer(text)
    classifier: Optional[FieldClassifier] = None
    try:
        normalized = normalizer.normalize()
        classifier = FieldClassifier(split_fields(normalized.text), note)
        parsed = classifier.classify()
    except DateParseError as e:
        logger.debug(f"Could not parse date {original!r}: {e.message}")
        reformatted = normalizer.significant_reformat or (
            classifier is not None and classifier.significant_reformat
        )
        return ParseResult(
            date=e.partial if e.partial is not None else ParsedDate(text=note),
            significant_reformat=reformatted,
            error=e.error,
            error_message=e.message,
        )

    if normalized.save_original:
        parsed = replace(parsed, text=join_notes(f"({date_part})", parsed.text))

    return ParseResult(
        date=parsed,
        significant_reformat=normalized.significant_reformat or classifier.significant_reformat,
    )
