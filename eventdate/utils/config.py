"""Configuration for the event date engine."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from ..validation.date_rules import REFERENCE_TIMEZONE


@dataclass
class EngineConfig:
    """Configuration for validating event dates."""

    # Zone in which "today" is read for the future date check
    reference_timezone: str = REFERENCE_TIMEZONE

    # Replaces the system clock, mainly for tests
    clock: Optional[Callable[[], date]] = None

    def __post_init__(self):
        """Fail early on an unknown time zone."""
        self._zone = ZoneInfo(self.reference_timezone)

    def today(self) -> date:
        """Return today's date, read fresh on every call."""
        if self.clock is not None:
            return self.clock()
        return datetime.now(self._zone).date()


# Global configuration instance
default_config = EngineConfig()
