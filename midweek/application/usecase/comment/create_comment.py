"""Create comment use case."""

from datetime import date

from pydantic import BaseModel

from midweek.application.usecase.base import BaseUseCase
from midweek.application.usecase.comment.get_comments import (
    CommentItem,
    to_comment_item,
)
from midweek.domain.service import CommentService
from midweek.domain.value import UserName


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    user_name: UserName
    vote_date: date
    text: str


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase(
    BaseUseCase[CreateCommentRequest, CreateCommentResponse]
):
    """Use case for adding a comment to a Wednesday's thread."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            ValidationError: If the text is blank or the date is not a Wednesday
        """
        comment = await self.comment_service.add_comment(
            user_name=request.user_name,
            vote_date=request.vote_date,
            text=request.text,
        )
        return CreateCommentResponse(comment=to_comment_item(comment))
