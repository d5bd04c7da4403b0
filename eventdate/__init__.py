"""eventdate - Parse, validate and compare free-text genealogical event dates."""

__version__ = "0.1.0"

from .core.event_date import EventDate
from .core.parsed_date import ParsedDate, SubDate
from .core.parser import ParseResult, parse_date
from .core.vocabulary import DateModifier
from .core.gedcom_reader import GedcomDateReader, DatedEvent, DateFinding, audit_dates
from .utils.config import EngineConfig, default_config
from .validation.errors import DateError

__all__ = [
    'EventDate',
    'ParsedDate',
    'SubDate',
    'ParseResult',
    'parse_date',
    'DateModifier',
    'GedcomDateReader',
    'DatedEvent',
    'DateFinding',
    'audit_dates',
    'EngineConfig',
    'default_config',
    'DateError',
]
