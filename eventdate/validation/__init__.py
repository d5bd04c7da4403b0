"""
Validation module for event dates.

Provides the error taxonomy, the numeric and calendar rules, and the editor
that validates a parsed date and renders its canonical form.
"""

from .errors import (
    DateError,
    DateParseError,
)

from .date_rules import (
    MIN_YEAR,
    MAX_YEAR,
    MIN_SPLIT_YEAR,
    MAX_SPLIT_YEAR,
    MONTH_LENGTHS,
    MONTH_OFFSETS,
    DISCRETE_EVENT_TYPES,
    is_discrete_event,
)

from .date_editor import (
    DateEditor,
    EditResult,
    edit_date,
)


__all__ = [
    # Errors
    'DateError',
    'DateParseError',

    # Rules
    'MIN_YEAR',
    'MAX_YEAR',
    'MIN_SPLIT_YEAR',
    'MAX_SPLIT_YEAR',
    'MONTH_LENGTHS',
    'MONTH_OFFSETS',
    'DISCRETE_EVENT_TYPES',
    'is_discrete_event',

    # Editing
    'DateEditor',
    'EditResult',
    'edit_date',
]
