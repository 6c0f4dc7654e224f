"""Calendar domain service."""

from datetime import date, datetime
from zoneinfo import ZoneInfo

from midweek.config import VotingSettings
from midweek.domain import calendar
from midweek.domain.error import ValidationError

from .base import Service


def _require_wednesday(value: date) -> None:
    # Stepping whole weeks from another weekday never lands on a Wednesday
    if not calendar.is_wednesday(value):
        raise ValidationError(f"{calendar.format_date(value)} is not a Wednesday")


class Clock:
    """Source of the current time in the configured timezone."""

    def __init__(self, timezone: str) -> None:
        self.tz = ZoneInfo(timezone)

    def now(self) -> datetime:
        return datetime.now(self.tz)


class CalendarService(Service):
    """Domain service answering calendar questions relative to "now".

    Wraps the pure functions of :mod:`midweek.domain.calendar` with the
    configured window sizes and a clock.
    """

    def __init__(self, voting_settings: VotingSettings, clock: Clock) -> None:
        """Initialize calendar service.

        Args:
            voting_settings: Window and extension sizes
            clock: Clock providing the current time
        """
        self.settings = voting_settings
        self.clock = clock

    def today(self) -> date:
        """Get the current calendar day."""
        return self.clock.now().date()

    def anchor(self) -> date:
        """Get the current Wednesday, or the next one if today is not a Wednesday."""
        return calendar.current_or_next_wednesday(self.today())

    def wednesday_window(self, count: int | None = None) -> list[date]:
        """Get the initial window of Wednesdays.

        Args:
            count: Window size, defaults to the configured ``window_size``

        Returns:
            Wednesdays in ascending order
        """
        if count is None:
            count = self.settings.window_size
        return calendar.window_of_wednesdays(count, self.today())

    def more_past(self, before: date, count: int | None = None) -> list[date]:
        """Get Wednesdays preceding ``before``, ascending.

        Raises:
            ValidationError: If ``before`` is not a Wednesday
        """
        _require_wednesday(before)
        if count is None:
            count = self.settings.extend_count
        return calendar.extend_past(before, count)

    def more_future(self, after: date, count: int | None = None) -> list[date]:
        """Get Wednesdays following ``after``, ascending.

        Raises:
            ValidationError: If ``after`` is not a Wednesday
        """
        _require_wednesday(after)
        if count is None:
            count = self.settings.extend_count
        return calendar.extend_future(after, count)

    def is_past_date(self, value: date) -> bool:
        return calendar.is_past(value, self.today())

    def is_today_date(self, value: date) -> bool:
        return calendar.is_today(value, self.today())
