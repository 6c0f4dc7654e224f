"""In-memory comment repository for testing."""

from datetime import date

from midweek.domain.model.comment import Comment
from midweek.domain.repository.comment import CommentRepository


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: list[Comment] = []

    async def find_by_date(self, vote_date: date) -> list[Comment]:
        """Find all comments for a Wednesday in creation order."""
        return [c for c in self._comments if c.vote_date == vote_date]

    async def save(self, comment: Comment) -> Comment:
        """Append a comment."""
        self._comments.append(comment)
        return comment
