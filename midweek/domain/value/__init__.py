"""Domain value objects for Midweek."""

from midweek.domain.value.identifiers import CommentId, VoteId
from midweek.domain.value.types import Attendance, MinPlayers, UserName, VoterEntry

__all__ = [
    # Identifiers
    "VoteId",
    "CommentId",
    # Types
    "Attendance",
    "MinPlayers",
    "UserName",
    "VoterEntry",
]
