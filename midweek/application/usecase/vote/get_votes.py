"""Get votes use case."""

from datetime import date, datetime

from pydantic import BaseModel

from midweek.application.usecase.base import BaseUseCase
from midweek.domain.model import Vote, VoteSummary
from midweek.domain.service import CalendarService, VoteService
from midweek.domain.value import Attendance, MinPlayers, UserName


class VoteItem(BaseModel):
    """Vote item in response."""

    vote_id: str
    user_name: str
    vote_date: date
    attendance: Attendance
    min_players: MinPlayers
    guests: int
    created_at: datetime
    updated_at: datetime


def to_vote_item(vote: Vote) -> VoteItem:
    """Convert a vote entity to its response item."""
    return VoteItem(
        vote_id=str(vote.id),
        user_name=vote.user_name.root,
        vote_date=vote.vote_date,
        attendance=vote.attendance,
        min_players=vote.min_players,
        guests=vote.guests,
        created_at=vote.created_at,
        updated_at=vote.updated_at,
    )


class GetVotesRequest(BaseModel):
    """Get votes request."""

    vote_date: date
    user_name: UserName | None = None  # Whose vote to report as my_vote


class GetVotesResponse(BaseModel):
    """Get votes response."""

    vote_date: date
    is_past: bool
    is_today: bool
    votes: list[VoteItem]
    summary: VoteSummary
    my_vote: VoteItem | None = None


class GetVotesUseCase(BaseUseCase[GetVotesRequest, GetVotesResponse]):
    """Use case for reading a Wednesday's votes and their summary."""

    def __init__(
        self, vote_service: VoteService, calendar_service: CalendarService
    ) -> None:
        """Initialize get votes use case.

        Args:
            vote_service: Vote domain service
            calendar_service: Calendar service for past/today flags
        """
        self.vote_service = vote_service
        self.calendar_service = calendar_service

    async def execute(self, request: GetVotesRequest) -> GetVotesResponse:
        """Execute get votes flow.

        Args:
            request: Date to read, optionally the name of the asking voter

        Returns:
            Votes in creation order, their summary, and the asker's own vote

        Raises:
            InvalidAttendanceValueError: If stored data holds an unknown attendance
        """
        votes, summary = await self.vote_service.get_votes_with_summary(
            request.vote_date
        )

        my_vote = None
        if request.user_name is not None:
            my_vote = await self.vote_service.get_vote(
                request.user_name, request.vote_date
            )

        return GetVotesResponse(
            vote_date=request.vote_date,
            is_past=self.calendar_service.is_past_date(request.vote_date),
            is_today=self.calendar_service.is_today_date(request.vote_date),
            votes=[to_vote_item(vote) for vote in votes],
            summary=summary,
            my_vote=to_vote_item(my_vote) if my_vote else None,
        )
