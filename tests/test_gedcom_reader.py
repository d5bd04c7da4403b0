"""Tests for reading and auditing GEDCOM event dates."""

import os
import tempfile
from datetime import date

import pytest
from eventdate import EngineConfig
from eventdate.core.gedcom_reader import (
    EVENT_TYPES,
    DatedEvent,
    DateFinding,
    GedcomDateReader,
    audit_dates,
)
from eventdate.validation.errors import DateError


SAMPLE_GEDCOM = """0 HEAD
1 SOUR TestSource
1 GEDC
2 VERS 5.5.1
0 @I1@ INDI
1 NAME John /Smith/
1 SEX M
1 BIRT
2 DATE ABT 1850
2 PLAC London, England
1 DEAT
2 DATE 30 FEB 1900
1 BURI
2 DATE 1900-03-05
1 OCCU Farmer
0 @I2@ INDI
1 NAME Mary /Jones/
1 SEX F
1 BIRT
2 PLAC Leeds, England
0 @F1@ FAM
1 HUSB @I1@
1 WIFE @I2@
1 MARR
2 DATE FROM 1870 TO 1871
0 TRLR
"""


@pytest.fixture
def sample_gedcom_file():
    """Create a temporary GEDCOM file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.ged', delete=False) as f:
        f.write(SAMPLE_GEDCOM)
        temp_path = f.name

    yield temp_path

    if os.path.exists(temp_path):
        os.unlink(temp_path)


class TestGedcomDateReader:
    """Tests for collecting dated events."""

    def test_load_events(self, sample_gedcom_file):
        """Test that every event with a DATE is collected in file order."""
        reader = GedcomDateReader()
        events = reader.load_gedcom(sample_gedcom_file)

        assert [event.tag for event in events] == ['BIRT', 'DEAT', 'BURI', 'MARR']
        assert reader.events == events

    def test_event_details(self, sample_gedcom_file):
        """Test the owner and type of collected events."""
        events = GedcomDateReader().load_gedcom(sample_gedcom_file)

        birth = events[0]
        assert birth.owner_id == '@I1@'
        assert birth.owner_name == 'John Smith'
        assert birth.event_type == 'Birth'
        assert birth.date == 'ABT 1850'

        marriage = events[3]
        assert marriage.owner_id == '@F1@'
        assert marriage.owner_name is None
        assert marriage.event_type == 'Marriage'

    def test_latin1_file(self, tmp_path):
        """Test that a file saved in a legacy 8-bit encoding is decoded."""
        gedcom_file = tmp_path / 'legacy.ged'
        gedcom_file.write_bytes(SAMPLE_GEDCOM.replace('John /Smith/', 'José /García/')
                                .encode('latin-1'))

        events = GedcomDateReader().load_gedcom(str(gedcom_file))

        assert events[0].owner_name == 'José García'
        assert events[0].date == 'ABT 1850'

    def test_utf8_bom_file(self, tmp_path):
        """Test that a byte order mark does not hide the first record."""
        gedcom_file = tmp_path / 'bom.ged'
        gedcom_file.write_bytes(SAMPLE_GEDCOM.encode('utf-8-sig'))

        events = GedcomDateReader().load_gedcom(str(gedcom_file))

        assert [event.tag for event in events] == ['BIRT', 'DEAT', 'BURI', 'MARR']

    def test_missing_file(self):
        """Test loading a file that does not exist."""
        with pytest.raises(FileNotFoundError):
            GedcomDateReader().load_gedcom('/nonexistent/file.ged')

    def test_event_type_names(self):
        """Test the tag to event type mapping."""
        assert EVENT_TYPES['CHR'] == 'Christening'
        assert EVENT_TYPES['DIVF'] == 'Divorce Filing'


class TestAuditDates:
    """Tests for auditing collected dates."""

    def setup_method(self):
        """Set up test fixtures."""
        self.config = EngineConfig(clock=lambda: date(2024, 6, 15))

    def _event(self, date_text, event_type='Birth'):
        return DatedEvent(
            owner_id='@I1@',
            owner_name='John Smith',
            tag='BIRT',
            event_type=event_type,
            date=date_text,
        )

    def test_audit_file(self, sample_gedcom_file):
        """Test the findings for the sample file."""
        events = GedcomDateReader().load_gedcom(sample_gedcom_file)
        findings = audit_dates(events, self.config)

        assert len(findings) == 2

        death, burial = findings
        assert death.is_error
        assert death.error == DateError.INVALID_DAY_FOR_MONTH
        assert death.error_message == "Invalid day for Feb"

        assert not burial.is_error
        assert burial.suggested == "5 Mar 1900"

    def test_valid_date_has_no_finding(self):
        """Test that clean dates are not reported."""
        assert audit_dates([self._event('ABT 1850')], self.config) == []

    def test_future_date(self):
        """Test that the injected clock is used."""
        findings = audit_dates([self._event('2030')], self.config)
        assert findings[0].error == DateError.FUTURE_DATE

    def test_finding_str(self):
        """Test the printable form of findings."""
        error = DateFinding(
            event=self._event('30 FEB 1900', 'Death'),
            error=DateError.INVALID_DAY_FOR_MONTH,
            error_message="Invalid day for Feb",
        )
        assert str(error) == "@I1@ (John Smith) Death: '30 FEB 1900' - Invalid day for Feb"

        reformat = DateFinding(event=self._event('1850-01-15'), suggested='15 Jan 1850')
        assert str(reformat) == "@I1@ (John Smith) Birth: '1850-01-15' -> '15 Jan 1850'"
