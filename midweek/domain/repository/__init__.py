"""Repository interfaces for the Midweek domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from midweek.domain.repository.comment import CommentRepository
from midweek.domain.repository.vote import VoteRepository

__all__ = [
    "CommentRepository",
    "VoteRepository",
]
