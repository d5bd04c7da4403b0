"""
Error taxonomy for event date parsing and editing.

Every problem the engine can detect has a member here. The member value is the
user-facing message (a template for the few messages that name a field).
"""

from enum import Enum
from typing import Any, Optional


class DateError(Enum):
    """Closed set of problems reported for an event date."""
    AMBIGUOUS_DATE = "Ambiguous date"
    WFT_NOT_ACCEPTED = "WFT estimates not accepted"
    INCOMPLETE_SPLIT_YEAR = "Incomplete split year"
    INVALID_SPLIT_YEAR = "Invalid split year"
    SPLIT_YEAR_NOT_VALID_FOR_YEAR = "Split year not valid for this year"
    SPLIT_YEAR_WRONG_MONTH = "Split year valid only for Jan-Mar"
    TOO_MANY_NUMBERS = "Too many numbers (days/years)"
    TOO_MANY_MONTHS = "Too many months"
    TOO_MANY_PARTS = "Too many parts"
    INVALID_COMBINATION_OF_MODIFIERS = "Invalid combination of modifiers"
    MODIFIER_ORDER_NOT_SUPPORTED = "Modifier order not supported"
    INCORRECT_BET_AND_USAGE = "Incorrect usage of bet/and"
    UNRECOGNIZED_TEXT = "Unrecognized text"
    INCOMPLETE_DATE = "Incomplete date"
    INVALID_DAY_FOR_MONTH = "Invalid day for {month}"
    INVALID_DATE_RANGE = "Invalid date range"
    FUTURE_DATE = "Future date"
    INVALID_DAY_NUMBER = "Invalid day number"
    INVALID_YEAR_NUMBER = "Invalid year number"
    INVALID_DATE_FORMAT = "Invalid date format"
    MISSING_MONTH = "Missing month"

    def message(self, **details: Any) -> str:
        """Render the message, filling in any named details."""
        if details:
            return self.value.format(**details)
        return self.value


class DateParseError(Exception):
    """Raised inside a pipeline stage to abandon the current date.

    Stages catch it at their boundary and hand the error back as a value,
    so it never reaches code that only queries an EventDate. ``partial``
    holds whatever ParsedDate could still be recovered, e.g. the year of an
    ambiguous numeric date.
    """

    def __init__(self, error: DateError, partial: Optional[Any] = None, **details: Any):
        self.error = error
        self.partial = partial
        self.message = error.message(**details)
        super().__init__(self.message)
