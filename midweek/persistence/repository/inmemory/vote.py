"""In-memory vote repository for testing."""

from datetime import date, datetime, timezone
from typing import Optional
from uuid import uuid4

from midweek.domain.model.vote import Vote
from midweek.domain.repository.vote import VoteRepository
from midweek.domain.value import Attendance, MinPlayers, UserName, VoteId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Votes are keyed by (user_name, vote_date); dict insertion order is
    creation order, and updating an existing key keeps its position.
    """

    def __init__(self) -> None:
        self._votes: dict[tuple[str, date], Vote] = {}

    async def find_by_date(self, vote_date: date) -> list[Vote]:
        """Find all votes for a Wednesday in creation order."""
        return [v for v in self._votes.values() if v.vote_date == vote_date]

    async def find_by_user_and_date(
        self, user_name: UserName, vote_date: date
    ) -> Optional[Vote]:
        """Find one person's vote for a Wednesday."""
        return self._votes.get((user_name.root, vote_date))

    async def upsert(
        self,
        user_name: UserName,
        vote_date: date,
        attendance: Attendance,
        min_players: MinPlayers,
        guests: int,
    ) -> Vote:
        """Insert a vote or update the existing one."""
        key = (user_name.root, vote_date)
        now = datetime.now(timezone.utc)
        existing = self._votes.get(key)

        if existing:
            vote = existing.model_copy(
                update={
                    "attendance": attendance,
                    "min_players": min_players,
                    "guests": guests,
                    "updated_at": now,
                }
            )
        else:
            vote = Vote(
                id=VoteId(uuid4()),
                user_name=user_name,
                vote_date=vote_date,
                attendance=attendance,
                min_players=min_players,
                guests=guests,
                created_at=now,
                updated_at=now,
            )

        self._votes[key] = vote
        return vote
