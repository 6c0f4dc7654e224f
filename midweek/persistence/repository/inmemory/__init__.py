"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryVoteRepository",
]
