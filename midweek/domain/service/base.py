"""Base service class for domain services."""

from datetime import date

from midweek.config import VotingSettings
from midweek.domain import calendar
from midweek.domain.error import ValidationError


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities.
    """

    pass


def require_event_date(vote_date: date, settings: VotingSettings) -> None:
    """Reject writes for days the game is not played on.

    Args:
        vote_date: Date a vote or comment is written for
        settings: Voting settings (``enforce_wednesday`` switches the check)

    Raises:
        ValidationError: If enforcement is on and the date is not a Wednesday
    """
    if settings.enforce_wednesday and not calendar.is_wednesday(vote_date):
        raise ValidationError(
            f"{calendar.format_date(vote_date)} is not a Wednesday"
        )
