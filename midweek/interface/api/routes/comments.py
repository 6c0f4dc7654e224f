"""Comment routes."""

from datetime import date

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from midweek.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from midweek.domain.error import StoreUnavailableError, ValidationError
from midweek.domain.value import UserName

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    user_name: UserName
    vote_date: date
    # Length is checked on the trimmed text by CommentService
    text: str = Field(min_length=1)


@router.post(
    "",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Add a comment to a Wednesday's thread.

    Args:
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI

    Returns:
        Created comment

    Raises:
        HTTPException: 400 if the text is blank or the date is not a Wednesday
    """
    try:
        use_case_request = CreateCommentRequest(
            user_name=request.user_name,
            vote_date=request.vote_date,
            text=request.text,
        )
        return await create_comment_use_case.execute(use_case_request)
    except ValidationError as e:
        logfire.warn("Comment rejected", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except StoreUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        )


@router.get("", response_model=GetCommentsResponse)
async def get_comments(
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    vote_date: date = Query(alias="date"),
) -> GetCommentsResponse:
    """Get a Wednesday's comments in the order they were written.

    Args:
        get_comments_use_case: Get comments use case from DI
        vote_date: Wednesday to read (``?date=YYYY-MM-DD``)
    """
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(vote_date=vote_date)
        )
    except StoreUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        )
