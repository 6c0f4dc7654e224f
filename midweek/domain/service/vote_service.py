"""Vote domain service."""

from datetime import date

import logfire

from midweek.config import VotingSettings
from midweek.domain.error import ValidationError
from midweek.domain.model import Vote, VoteSummary
from midweek.domain.repository import VoteRepository
from midweek.domain.tally import summarize
from midweek.domain.value import Attendance, MinPlayers, UserName

from .base import Service, require_event_date


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        voting_settings: VotingSettings,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            voting_settings: Voting configuration
        """
        self.vote_repository = vote_repository
        self.settings = voting_settings

    async def cast_vote(
        self,
        user_name: UserName,
        vote_date: date,
        attendance: Attendance,
        min_players: MinPlayers,
        guests: int = 0,
    ) -> Vote:
        """Record a vote, replacing any earlier vote of the same person for the date.

        Args:
            user_name: Voter name
            vote_date: Wednesday voted on
            attendance: Attendance answer
            min_players: Minimum headcount preference
            guests: Number of guests brought along

        Returns:
            The stored vote

        Raises:
            ValidationError: If the date is not a Wednesday or guests are out of range
        """
        with logfire.span(
            "vote_service.cast_vote",
            user_name=user_name.root,
            vote_date=vote_date.isoformat(),
            attendance=attendance.value,
            min_players=min_players.value,
            guests=guests,
        ):
            require_event_date(vote_date, self.settings)

            if guests < 0 or guests > self.settings.max_guests:
                logfire.warn("Guest count out of range", guests=guests)
                raise ValidationError(
                    f"Guests must be between 0 and {self.settings.max_guests}"
                )

            vote = await self.vote_repository.upsert(
                user_name=user_name,
                vote_date=vote_date,
                attendance=attendance,
                min_players=min_players,
                guests=guests,
            )
            logfire.info(
                "Vote stored",
                vote_id=str(vote.id),
                user_name=user_name.root,
                vote_date=vote_date.isoformat(),
                revote=vote.updated_at != vote.created_at,
            )
            return vote

    async def get_votes_for_date(self, vote_date: date) -> list[Vote]:
        """Get all votes for a Wednesday in creation order."""
        with logfire.span(
            "vote_service.get_votes_for_date", vote_date=vote_date.isoformat()
        ):
            votes = await self.vote_repository.find_by_date(vote_date)
            logfire.info(
                "Votes retrieved", vote_date=vote_date.isoformat(), count=len(votes)
            )
            return votes

    async def get_vote(self, user_name: UserName, vote_date: date) -> Vote | None:
        """Get one person's vote for a Wednesday.

        Returns:
            The vote if the person has voted, None otherwise
        """
        with logfire.span(
            "vote_service.get_vote",
            user_name=user_name.root,
            vote_date=vote_date.isoformat(),
        ):
            return await self.vote_repository.find_by_user_and_date(
                user_name, vote_date
            )

    async def get_votes_with_summary(
        self, vote_date: date
    ) -> tuple[list[Vote], VoteSummary]:
        """Get the votes of a Wednesday together with their summary.

        Raises:
            InvalidAttendanceValueError: If a stored vote has an unknown attendance
        """
        votes = await self.get_votes_for_date(vote_date)
        with logfire.span("vote_service.summarize", vote_date=vote_date.isoformat()):
            summary = summarize(votes)
            logfire.info(
                "Votes summarized",
                vote_date=vote_date.isoformat(),
                yes=summary.yes.count,
                no=summary.no.count,
                total_players=summary.total_players,
            )
        return votes, summary
