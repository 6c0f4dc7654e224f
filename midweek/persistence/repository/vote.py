"""PostgreSQL implementation of Vote repository."""

from datetime import date, datetime, timezone
from typing import List, Optional
from uuid import uuid4

from sqlalchemy import and_, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from midweek.domain.model import Vote
from midweek.domain.repository import VoteRepository
from midweek.domain.value import Attendance, MinPlayers, UserName
from midweek.persistence.database import store_errors
from midweek.persistence.mappers import row_to_vote
from midweek.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_date(self, vote_date: date) -> List[Vote]:
        """Find all votes for a Wednesday in creation order."""
        stmt = (
            select(votes_table)
            .where(votes_table.c.vote_date == vote_date)
            .order_by(votes_table.c.created_at, votes_table.c.id)
        )
        with store_errors("votes.find_by_date"):
            result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def find_by_user_and_date(
        self, user_name: UserName, vote_date: date
    ) -> Optional[Vote]:
        """Find one person's vote for a Wednesday."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_name == user_name.root,
                votes_table.c.vote_date == vote_date,
            )
        )
        with store_errors("votes.find_by_user_and_date"):
            result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def upsert(
        self,
        user_name: UserName,
        vote_date: date,
        attendance: Attendance,
        min_players: MinPlayers,
        guests: int,
    ) -> Vote:
        """Insert a vote or update the existing one in a single statement."""
        now = datetime.now(timezone.utc)
        stmt = insert(votes_table).values(
            id=uuid4(),
            user_name=user_name.root,
            vote_date=vote_date,
            attendance=attendance.value,
            min_players=min_players.value,
            guests=guests,
            created_at=now,
            updated_at=now,
        )
        # id and created_at stay untouched on conflict
        stmt = stmt.on_conflict_do_update(
            constraint="uq_votes_user_date",
            set_={
                "attendance": stmt.excluded.attendance,
                "min_players": stmt.excluded.min_players,
                "guests": stmt.excluded.guests,
                "updated_at": stmt.excluded.updated_at,
            },
        ).returning(votes_table)

        with store_errors("votes.upsert"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
        return row_to_vote(row._asdict())
