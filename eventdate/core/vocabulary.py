"""
Multi-language vocabulary for event dates.

Month names and date modifiers in English, Dutch, French, German, Spanish,
Norwegian, Danish and Portuguese (accented and unaccented), mapped to one
canonical GEDCOM-style spelling per concept. Surface forms are lower case;
input is lower-cased before lookup.
"""

from enum import Enum
from types import MappingProxyType
from typing import Optional


class DateModifier(Enum):
    """Date modifiers, valued by their canonical spelling."""
    ABOUT = "Abt"
    CALCULATED = "Cal"
    ESTIMATED = "Est"
    BEFORE = "Bef"
    AFTER = "Aft"
    FROM = "From"
    TO = "to"
    BETWEEN = "Bet"
    AND = "and"
    INTERPRETED = "Int"

    @property
    def is_supplemental(self) -> bool:
        """Whether this modifier may follow another one (e.g. "Bef abt")."""
        return self in SUPPLEMENTAL_MODIFIERS

    @property
    def opens_lower_bound(self) -> bool:
        """Whether the date only gives an upper bound (Bef, To)."""
        return self in (DateModifier.BEFORE, DateModifier.TO)

    @property
    def opens_upper_bound(self) -> bool:
        """Whether the date only gives a lower bound (Aft, From)."""
        return self in (DateModifier.AFTER, DateModifier.FROM)

    @property
    def shifts_later(self) -> bool:
        """Whether the sort key moves one unit later for this modifier."""
        return self in (DateModifier.AFTER, DateModifier.BETWEEN, DateModifier.FROM)

    @property
    def is_approximate(self) -> bool:
        """Whether the date is widened for fuzzy comparison (Abt, Est)."""
        return self in (DateModifier.ABOUT, DateModifier.ESTIMATED)


SUPPLEMENTAL_MODIFIERS = frozenset({
    DateModifier.ABOUT,
    DateModifier.CALCULATED,
    DateModifier.ESTIMATED,
})


_MONTH_NAMES = {
    'Jan': ('jan', 'january', 'januari', 'janvier', 'januar', 'ene', 'enero', 'janeiro'),
    'Feb': ('feb', 'february', 'febr', 'februari', 'fév', 'fev', 'février', 'fevrier',
            'februar', 'febrero', 'fevereiro'),
    'Mar': ('mar', 'march', 'mrt', 'maart', 'mars', 'mär', 'märz', 'marz', 'maerz',
            'marzo', 'março'),
    'Apr': ('apr', 'april', 'apl', 'avr', 'avril', 'abr', 'abril'),
    'May': ('may', 'mei', 'mai', 'mayo', 'maj', 'maio'),
    'Jun': ('jun', 'june', 'juni', 'juin', 'junio', 'junho'),
    'Jul': ('jul', 'july', 'juli', 'juillet', 'julio', 'julho'),
    'Aug': ('aug', 'august', 'augustus', 'aoû', 'aou', 'août', 'aout', 'ago', 'agosto'),
    'Sep': ('sep', 'september', 'sept', 'septembre', 'septiembre', 'set', 'setembro'),
    'Oct': ('oct', 'october', 'okt', 'oktober', 'octobre', 'octubre', 'out', 'outubro'),
    'Nov': ('nov', 'november', 'novembre', 'noviembre', 'novembro'),
    'Dec': ('dec', 'december', 'déc', 'décembre', 'decembre', 'dez', 'dezember', 'dic',
            'diciembre', 'des', 'desember', 'dezembro'),
}

_MODIFIER_NAMES = {
    DateModifier.ABOUT: ('abt', 'about', 'approx', 'approximately', 'vers', 'omstreeks',
                         'omstr', 'omkring', 'omk'),
    DateModifier.CALCULATED: ('cal', 'calculated', 'calc', 'calcd'),
    DateModifier.ESTIMATED: ('est', 'estimated', 'estd', 'c', 'ca', 'circa', 'cir', 'say',
                             'ansl', 'anslat'),
    DateModifier.BEFORE: ('bef', 'before', 'bfr', 'by', 'voor', 'vóór', 'før', 'avant'),
    DateModifier.AFTER: ('aft', 'after', 'na', 'ett', 'etter'),
    DateModifier.FROM: ('from', 'frm', 'van'),
    DateModifier.TO: ('to', 'tot', 'until'),
    DateModifier.BETWEEN: ('bet', 'between', 'btw'),
    DateModifier.AND: ('and', '&'),
    DateModifier.INTERPRETED: ('int', 'interpreted'),
}

# Canonical month codes in calendar order
MONTH_CODES = tuple(_MONTH_NAMES)

MONTHS = MappingProxyType({
    surface: code
    for code, surfaces in _MONTH_NAMES.items()
    for surface in surfaces
})

MODIFIERS = MappingProxyType({
    surface: modifier
    for modifier, surfaces in _MODIFIER_NAMES.items()
    for surface in surfaces
})

ORDINAL_SUFFIXES = frozenset({'st', 'nd', 'rd', 'th'})

ERA_SUFFIXES = frozenset({'bc', 'bce'})

# Whole inputs meaning "no date", optionally replaced by a note
UNKNOWN_DATES = frozenset({
    'unknown', 'date unknown', 'unk', 'unknow', 'not known',
    'unbekannt', 'unbek.', 'onbekend', 'inconnue',
})
NOTE_DATES = MappingProxyType({
    'in infancy': '(in infancy)',
    'died in infancy': '(in infancy)',
    'infant': '(in infancy)',
    'infancy': '(in infancy)',
    'young': '(young)',
    'died young': '(young)',
})


def lookup_month(word: str) -> Optional[str]:
    """Return the canonical month code for a word, or None."""
    return MONTHS.get(word)


def lookup_modifier(word: str) -> Optional[DateModifier]:
    """Return the modifier a word stands for, or None."""
    return MODIFIERS.get(word)


def month_number(code: Optional[str]) -> int:
    """Return 1-12 for a canonical month code (0 when there is no month)."""
    if code is None:
        return 0
    return MONTH_CODES.index(code) + 1


def month_code(number: int) -> str:
    """Return the canonical code for a month number 1-12."""
    return MONTH_CODES[number - 1]
