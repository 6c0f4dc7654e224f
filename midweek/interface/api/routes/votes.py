"""Vote routes."""

from datetime import date

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status

from midweek.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetVotesRequest,
    GetVotesResponse,
    GetVotesUseCase,
)
from midweek.domain.error import (
    DataIntegrityError,
    StoreUnavailableError,
    ValidationError,
)

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


@router.get("", response_model=GetVotesResponse)
async def get_votes(
    get_votes_use_case: FromDishka[GetVotesUseCase],
    vote_date: date = Query(alias="date"),
    user_name: str | None = Query(default=None, max_length=100),
) -> GetVotesResponse:
    """Get the votes and summary for a Wednesday.

    Args:
        get_votes_use_case: Get votes use case from DI
        vote_date: Wednesday to read (``?date=YYYY-MM-DD``)
        user_name: Name of the asking voter, their vote is echoed as my_vote

    Returns:
        Votes in creation order with the per-attendance summary

    Raises:
        HTTPException: 500 on corrupt stored data, 503 if the database is down
    """
    user_name = user_name.strip() if user_name else None
    try:
        request = GetVotesRequest(vote_date=vote_date, user_name=user_name or None)
        return await get_votes_use_case.execute(request)
    except DataIntegrityError as e:
        logfire.error("Stored votes are inconsistent", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Stored votes are inconsistent",
        )
    except StoreUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        )


@router.post("", response_model=CastVoteResponse)
async def cast_vote(
    request: CastVoteRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse:
    """Vote on a Wednesday, replacing the voter's earlier vote for that date.

    Args:
        request: Voter name, date, attendance, minimum players and guests
        cast_vote_use_case: Cast vote use case from DI

    Returns:
        The stored vote

    Raises:
        HTTPException: 400 on invalid input, 503 if the database is down
    """
    try:
        return await cast_vote_use_case.execute(request)
    except ValidationError as e:
        logfire.warn("Vote rejected", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except StoreUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        )
