"""Structured form of an event date."""

from dataclasses import dataclass, field, fields
from typing import Optional, Tuple

from .vocabulary import DateModifier, month_number


@dataclass(frozen=True, slots=True)
class SubDate:
    """One date of an event date (the only date, or one end of a range).

    Attributes:
        modifier: Leading modifier, e.g. Abt or Bet
        supplemental_modifier: Second modifier, e.g. the "abt" in "Bef abt 1850"
        day: Day of month without leading zeros
        month: Canonical month code (Jan-Dec)
        year: Year as written after normalization, may be a split year "1699/00"
        effective_year: Signed year used for comparisons ("1700" for "1699/00",
            "-100" for 100 BC)
        suffix: Era suffix, only "BC"
    """
    modifier: Optional[DateModifier] = None
    supplemental_modifier: Optional[DateModifier] = None
    day: Optional[str] = None
    month: Optional[str] = None
    year: Optional[str] = None
    effective_year: Optional[str] = None
    suffix: Optional[str] = None

    def is_empty(self) -> bool:
        """Check if nothing was captured for this date."""
        return all(getattr(self, f.name) is None for f in fields(self))

    @property
    def is_bc(self) -> bool:
        return self.suffix == 'BC'

    @property
    def month_num(self) -> int:
        return month_number(self.month)

    @property
    def day_num(self) -> int:
        return int(self.day) if self.day is not None else 0

    @property
    def year_num(self) -> Optional[int]:
        """Effective year as an integer."""
        if self.effective_year is None:
            return None
        return int(self.effective_year)


@dataclass(frozen=True, slots=True)
class ParsedDate:
    """An event date split into its end and (for ranges) start dates.

    Parsing reads the text right to left, so a single date lives in ``end``
    and ``start`` is only filled for a range ("Bet ... and ...",
    "From ... to ...").
    """
    end: SubDate = field(default_factory=SubDate)
    start: SubDate = field(default_factory=SubDate)
    text: Optional[str] = None

    @property
    def is_range(self) -> bool:
        """Whether the date has a start date (its own modifier or year)."""
        return self.start.modifier is not None or self.start.year is not None

    def first_dated(self) -> Optional[SubDate]:
        """Return the start date if it has a year, else the end date if it does."""
        if self.start.effective_year is not None:
            return self.start
        if self.end.effective_year is not None:
            return self.end
        return None

    def sub_dates(self) -> Tuple[SubDate, SubDate]:
        """Return (start, end) in reading order."""
        return self.start, self.end
