"""Comment domain service."""

import logfire
from datetime import date, datetime, timezone
from uuid import uuid4

from midweek.config import VotingSettings
from midweek.domain.error import ValidationError
from midweek.domain.model.comment import MAX_COMMENT_LENGTH, Comment
from midweek.domain.repository import CommentRepository
from midweek.domain.value import CommentId, UserName

from .base import Service, require_event_date


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        voting_settings: VotingSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            voting_settings: Voting configuration
        """
        self.comment_repository = comment_repository
        self.settings = voting_settings

    async def add_comment(
        self, user_name: UserName, vote_date: date, text: str
    ) -> Comment:
        """Append a comment to a Wednesday's thread.

        Args:
            user_name: Author name
            vote_date: Wednesday the comment belongs to
            text: Comment text, stored trimmed

        Returns:
            Created comment

        Raises:
            ValidationError: If the text is blank or too long, or the date is not a Wednesday
        """
        with logfire.span(
            "comment_service.add_comment",
            user_name=user_name.root,
            vote_date=vote_date.isoformat(),
            text_length=len(text),
        ):
            require_event_date(vote_date, self.settings)

            text = text.strip()
            if not text:
                raise ValidationError("Comment cannot be empty")
            if len(text) > MAX_COMMENT_LENGTH:
                raise ValidationError(
                    f"Comment must be at most {MAX_COMMENT_LENGTH} characters"
                )

            comment = Comment(
                id=CommentId(uuid4()),
                user_name=user_name,
                vote_date=vote_date,
                text=text,
                created_at=datetime.now(timezone.utc),
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                user_name=user_name.root,
                vote_date=vote_date.isoformat(),
            )
            return saved

    async def get_comments_for_date(self, vote_date: date) -> list[Comment]:
        """Get a Wednesday's comments in creation order."""
        with logfire.span(
            "comment_service.get_comments_for_date",
            vote_date=vote_date.isoformat(),
        ):
            comments = await self.comment_repository.find_by_date(vote_date)
            logfire.info(
                "Comments retrieved",
                vote_date=vote_date.isoformat(),
                count=len(comments),
            )
            return comments
