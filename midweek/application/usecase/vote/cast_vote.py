"""Cast vote use case."""

from datetime import date

from pydantic import BaseModel, Field

from midweek.application.usecase.base import BaseUseCase
from midweek.application.usecase.vote.get_votes import VoteItem, to_vote_item
from midweek.domain.model.vote import MAX_GUESTS
from midweek.domain.service import VoteService
from midweek.domain.value import Attendance, MinPlayers, UserName


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    user_name: UserName
    vote_date: date
    attendance: Attendance
    min_players: MinPlayers = MinPlayers.ANY
    guests: int = Field(default=0, ge=0, le=MAX_GUESTS)


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    vote: VoteItem
    created: bool  # False when an earlier vote was overwritten


class CastVoteUseCase(BaseUseCase[CastVoteRequest, CastVoteResponse]):
    """Use case for voting on a Wednesday (insert or overwrite)."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            The stored vote

        Raises:
            ValidationError: If the date is not a Wednesday or guests exceed the limit
        """
        vote = await self.vote_service.cast_vote(
            user_name=request.user_name,
            vote_date=request.vote_date,
            attendance=request.attendance,
            min_players=request.min_players,
            guests=request.guests,
        )

        return CastVoteResponse(
            vote=to_vote_item(vote),
            created=vote.created_at == vote.updated_at,
        )
