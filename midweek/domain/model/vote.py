"""Vote entity.

A vote is one person's attendance answer for one Wednesday.
Each name can hold a single vote per date; voting again overwrites it.
"""

from datetime import date, datetime, timezone

from pydantic import Field

from midweek.domain.model.common import DomainModel
from midweek.domain.value import Attendance, MinPlayers, UserName, VoteId

MAX_GUESTS = 10


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - Identity is (user_name, vote_date), enforced by a unique constraint
    - Re-voting updates attendance, min_players and guests in place,
      keeping id and created_at
    - Votes are never deleted
    """

    id: VoteId
    user_name: UserName
    vote_date: date
    attendance: Attendance
    min_players: MinPlayers = MinPlayers.ANY
    guests: int = Field(default=0, ge=0, le=MAX_GUESTS)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
