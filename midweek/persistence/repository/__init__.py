"""PostgreSQL repository implementations."""

from midweek.persistence.repository.comment import PostgresCommentRepository
from midweek.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresVoteRepository",
]
