"""Splitting of a normalized date into fields."""

import re
from typing import List

# Digit runs, a lone "/", or runs of anything that is not a digit, whitespace,
# "/" or punctuation (so accented month names stay whole).
FIELD_RE = re.compile(r'''[0-9]+|/|[^0-9\s/`~!@#%^*()_+\-={}|:'<>;,"\[\].\\]+''')


def split_fields(text: str) -> List[str]:
    """Split a date into its fields.

    Args:
        text: Normalized, lower-case date text

    Returns:
        Fields in the order they appear, e.g. ["bet", "1699", "/", "00"].
        Empty text gives an empty list.
    """
    return FIELD_RE.findall(text)


def is_numeric(field: str) -> bool:
    """Check if a field is a run of ASCII digits."""
    return field.isascii() and field.isdigit()
