"""Vote repository interface."""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from midweek.domain.model.vote import Vote
from midweek.domain.value import Attendance, MinPlayers, UserName


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_date(self, vote_date: date) -> List[Vote]:
        """Find all votes for a Wednesday.

        Args:
            vote_date: The event date

        Returns:
            Votes in creation order
        """
        pass

    @abstractmethod
    async def find_by_user_and_date(
        self, user_name: UserName, vote_date: date
    ) -> Optional[Vote]:
        """Find one person's vote for a Wednesday.

        Args:
            user_name: The voter's name
            vote_date: The event date

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def upsert(
        self,
        user_name: UserName,
        vote_date: date,
        attendance: Attendance,
        min_players: MinPlayers,
        guests: int,
    ) -> Vote:
        """Create a vote or overwrite the existing one for (user_name, vote_date).

        Must be a single atomic insert-or-update so that concurrent
        submissions for the same identity cannot produce two rows. On update
        attendance, min_players, guests and updated_at change; id and
        created_at are kept.

        Returns:
            The stored vote

        Raises:
            StoreUnavailableError: If the store cannot be reached
        """
        pass
