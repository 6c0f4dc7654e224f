"""Domain model entities for Midweek."""

from midweek.domain.model.comment import Comment
from midweek.domain.model.summary import AttendanceGroup, VoteSummary
from midweek.domain.model.vote import Vote

__all__ = [
    "Vote",
    "Comment",
    "AttendanceGroup",
    "VoteSummary",
]
