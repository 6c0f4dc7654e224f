"""Comment entity.

Comments form a flat, append-only thread under each Wednesday.
"""

from datetime import date, datetime, timezone

from pydantic import Field

from midweek.domain.model.common import DomainModel
from midweek.domain.value import CommentId, UserName

MAX_COMMENT_LENGTH = 2000


class Comment(DomainModel):
    """Comment entity.

    Comments are never edited or deleted. Text is stored trimmed.
    """

    id: CommentId
    user_name: UserName
    vote_date: date
    text: str = Field(min_length=1, max_length=MAX_COMMENT_LENGTH)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
