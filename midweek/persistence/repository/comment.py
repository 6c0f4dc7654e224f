"""PostgreSQL implementation of Comment repository."""

from datetime import date
from typing import List

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from midweek.domain.model import Comment
from midweek.domain.repository import CommentRepository
from midweek.persistence.database import store_errors
from midweek.persistence.mappers import comment_to_dict, row_to_comment
from midweek.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_date(self, vote_date: date) -> List[Comment]:
        """Find all comments for a Wednesday in creation order."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.vote_date == vote_date)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        with store_errors("comments.find_by_date"):
            result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Append a comment."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        with store_errors("comments.save"):
            await self.session.execute(stmt)
            await self.session.flush()
        return comment
