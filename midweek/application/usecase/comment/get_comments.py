"""Get comments use case."""

from datetime import date, datetime

from pydantic import BaseModel

from midweek.application.usecase.base import BaseUseCase
from midweek.domain.model import Comment
from midweek.domain.service import CommentService


class CommentItem(BaseModel):
    """Comment item in response."""

    comment_id: str
    user_name: str
    vote_date: date
    text: str
    created_at: datetime


def to_comment_item(comment: Comment) -> CommentItem:
    """Convert a comment entity to its response item."""
    return CommentItem(
        comment_id=str(comment.id),
        user_name=comment.user_name.root,
        vote_date=comment.vote_date,
        text=comment.text,
        created_at=comment.created_at,
    )


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    vote_date: date


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    vote_date: date
    comments: list[CommentItem]
    total: int


class GetCommentsUseCase(BaseUseCase[GetCommentsRequest, GetCommentsResponse]):
    """Use case for reading a Wednesday's comment thread."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Returns:
            Comments in creation order
        """
        comments = await self.comment_service.get_comments_for_date(request.vote_date)
        items = [to_comment_item(comment) for comment in comments]
        return GetCommentsResponse(
            vote_date=request.vote_date,
            comments=items,
            total=len(items),
        )
