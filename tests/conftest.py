"""Test configuration and fixtures."""

from datetime import date, datetime

import pytest

from midweek.config import VotingSettings
from midweek.domain.service import CalendarService, Clock

# 2026-10-21 is a Wednesday
WEDNESDAY = date(2026, 10, 21)


class FixedClock(Clock):
    """Clock frozen at a given moment."""

    def __init__(self, moment: datetime, timezone: str = "Europe/Prague") -> None:
        super().__init__(timezone)
        self.moment = moment.replace(tzinfo=self.tz)

    def now(self) -> datetime:
        return self.moment


def make_calendar_service(
    moment: datetime, voting_settings: VotingSettings | None = None
) -> CalendarService:
    """Build a calendar service whose "now" is ``moment``."""
    return CalendarService(
        voting_settings=voting_settings or VotingSettings(),
        clock=FixedClock(moment),
    )


@pytest.fixture
def wednesday() -> date:
    """A Wednesday to vote and comment on."""
    return WEDNESDAY

