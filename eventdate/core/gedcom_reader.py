"""Reading event dates out of GEDCOM files and auditing them."""

import logging
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from gedcom.parser import GedcomFormatViolationError, Parser
from gedcom.element.individual import IndividualElement
from gedcom.element.family import FamilyElement

from .event_date import EventDate
from ..utils.config import EngineConfig
from ..validation.errors import DateError

logger = logging.getLogger(__name__)

# Tried in order; latin-1 decodes any byte sequence so it comes last
GEDCOM_ENCODINGS = ('utf-8-sig', 'cp1252', 'latin-1')

# GEDCOM event tags and the event type names used for them
EVENT_TYPES: Dict[str, str] = {
    # Individual events
    'BIRT': 'Birth',
    'CHR': 'Christening',
    'DEAT': 'Death',
    'BURI': 'Burial',
    'CREM': 'Cremation',
    'ADOP': 'Adoption',
    'BAPM': 'Baptism',
    'BARM': 'Bar Mitzvah',
    'BASM': 'Bat Mitzvah',
    'BLES': 'Blessing',
    'CONF': 'Confirmation',
    'FCOM': 'First Communion',
    'ORDN': 'Ordination',
    'NATU': 'Naturalization',
    'EMIG': 'Emigration',
    'IMMI': 'Immigration',
    'GRAD': 'Graduation',
    'WILL': 'Will',
    'PROB': 'Probate',
    'RESI': 'Residence',
    'OCCU': 'Occupation',
    'EDUC': 'Education',
    'RETI': 'Retirement',
    'CENS': 'Census',
    # Family events
    'MARR': 'Marriage',
    'MARB': 'Marriage Banns',
    'MARL': 'Marriage License',
    'MARC': 'Marriage Contract',
    'ENGA': 'Engagement',
    'DIVF': 'Divorce Filing',
    'DIV': 'Divorce',
    'ANUL': 'Annulment',
    'EVEN': 'Event',
}


@dataclass(slots=True)
class DatedEvent:
    """An event with a DATE found in a GEDCOM file.

    Attributes:
        owner_id: Pointer of the individual or family, e.g. '@I1@'
        owner_name: Display name of the individual (None for families)
        tag: GEDCOM event tag, e.g. 'BIRT'
        event_type: Event type name, e.g. 'Birth'
        date: The DATE value as written in the file
    """
    owner_id: str
    owner_name: Optional[str]
    tag: str
    event_type: str
    date: str


@dataclass(slots=True)
class DateFinding:
    """A GEDCOM date that is invalid or that would be rewritten noticeably."""
    event: DatedEvent
    error: Optional[DateError] = None
    error_message: Optional[str] = None
    suggested: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def __str__(self) -> str:
        owner = self.event.owner_id
        if self.event.owner_name:
            owner += f" ({self.event.owner_name})"
        prefix = f"{owner} {self.event.event_type}: {self.event.date!r}"
        if self.is_error:
            return f"{prefix} - {self.error_message}"
        return f"{prefix} -> {self.suggested!r}"


class GedcomDateReader:
    """Collects dated events from GEDCOM 5.5 and 5.5.1 files."""

    def __init__(self):
        """Initialize the reader."""
        self.parser: Optional[Parser] = None
        self.events: List[DatedEvent] = []

    def load_gedcom(self, filepath: str) -> List[DatedEvent]:
        """Load a GEDCOM file and collect its dated events.

        Args:
            filepath: Path to the GEDCOM file

        Returns:
            List of DatedEvent objects in file order

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file is not a valid GEDCOM file
        """
        file_path = Path(filepath)
        if not file_path.exists():
            raise FileNotFoundError(f"GEDCOM file not found: {filepath}")

        raw = file_path.read_bytes()
        failures = []
        for encoding in GEDCOM_ENCODINGS:
            try:
                self.parser = _parse_gedcom_text(raw.decode(encoding))
            except (UnicodeDecodeError, GedcomFormatViolationError) as e:
                logger.debug(f"{filepath} is not readable as {encoding}: {e}")
                failures.append(f"{encoding}: {e}")
            else:
                break
        else:
            logger.warning(f"Could not read GEDCOM file {filepath}")
            raise ValueError(f"Not a readable GEDCOM file ({'; '.join(failures)})")

        self.events = self._extract_events()
        logger.info(f"Found {len(self.events)} dated events in {filepath}")
        return self.events

    def _extract_events(self) -> List[DatedEvent]:
        """Collect the dated events of every individual and family."""
        events: List[DatedEvent] = []

        if not self.parser:
            return events

        for element in self.parser.get_root_child_elements():
            if isinstance(element, IndividualElement):
                events.extend(self._parse_events(element, self._individual_name(element)))
            elif isinstance(element, FamilyElement):
                events.extend(self._parse_events(element, None))

        return events

    def _individual_name(self, element: IndividualElement) -> Optional[str]:
        given, surname = element.get_name()
        name = ' '.join(part for part in (given, surname) if part)
        return name or None

    def _parse_events(self, element, owner_name: Optional[str]) -> List[DatedEvent]:
        """Return the events of an individual or family that have a DATE.

        Args:
            element: Individual or Family element
            owner_name: Name to report with findings

        Returns:
            List of DatedEvent objects
        """
        events = []

        for child in element.get_child_elements():
            tag = child.get_tag()
            if tag not in EVENT_TYPES:
                continue

            for detail in child.get_child_elements():
                if detail.get_tag() == 'DATE' and detail.get_value():
                    events.append(DatedEvent(
                        owner_id=element.get_pointer(),
                        owner_name=owner_name,
                        tag=tag,
                        event_type=EVENT_TYPES[tag],
                        date=detail.get_value(),
                    ))
                    break

        return events


def _parse_gedcom_text(text: str) -> Parser:
    """Parse decoded GEDCOM text (python-gedcom only reads from a path)."""
    parser = Parser()
    with tempfile.TemporaryDirectory() as tmp_dir:
        tmp_path = Path(tmp_dir) / 'import.ged'
        tmp_path.write_text(text, encoding='utf-8')
        parser.parse_file(str(tmp_path), strict=False)
    return parser


def audit_dates(events: List[DatedEvent],
                config: Optional[EngineConfig] = None) -> List[DateFinding]:
    """Check the date of each event.

    Args:
        events: Events collected by GedcomDateReader
        config: Engine configuration (defaults to default_config)

    Returns:
        Findings for dates that fail validation or that parsing rewrote
        significantly, in the order of ``events``
    """
    findings = []

    for event in events:
        event_date = EventDate(event.date, event.event_type, config)
        if not event_date.edit_ok():
            findings.append(DateFinding(
                event=event,
                error=event_date.error(),
                error_message=event_date.error_message(),
            ))
        elif event_date.significant_reformat():
            findings.append(DateFinding(event=event, suggested=event_date.format_date()))

    errors = sum(1 for finding in findings if finding.is_error)
    logger.info(f"Audited {len(events)} dates: {errors} invalid, "
                f"{len(findings) - errors} significantly reformatted")
    return findings
