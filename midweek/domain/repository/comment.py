"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import date
from typing import List

from midweek.domain.model.comment import Comment


class CommentRepository(ABC):
    """Repository for Comment entity.

    Comments are append-only, so there is no update or delete.
    """

    @abstractmethod
    async def find_by_date(self, vote_date: date) -> List[Comment]:
        """Find all comments for a Wednesday.

        Args:
            vote_date: The event date

        Returns:
            Comments in creation order
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Append a comment.

        Args:
            comment: The comment to store

        Returns:
            The stored comment

        Raises:
            StoreUnavailableError: If the store cannot be reached
        """
        pass
