"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through an ORM.
"""

from typing import Any, Dict
from uuid import UUID

from midweek.domain.error import InvalidAttendanceValueError
from midweek.domain.model import Comment, Vote
from midweek.domain.value import Attendance, CommentId, MinPlayers, UserName, VoteId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model

    Raises:
        InvalidAttendanceValueError: If the row holds an unknown attendance value
    """
    try:
        attendance = Attendance(row["attendance"])
    except ValueError:
        raise InvalidAttendanceValueError(row["attendance"]) from None

    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_name=UserName(row["user_name"]),
        vote_date=row["vote_date"],
        attendance=attendance,
        min_players=MinPlayers(row["min_players"]),
        guests=row.get("guests") or 0,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        user_name=UserName(row["user_name"]),
        vote_date=row["vote_date"],
        text=row["text"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    return comment.model_dump(mode="python")
