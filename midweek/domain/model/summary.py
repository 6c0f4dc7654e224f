"""Vote summary read model.

Summaries are derived from the votes of one date on every read and are
never stored.
"""

from pydantic import Field

from midweek.domain.model.common import DomainModel
from midweek.domain.value import Attendance, VoterEntry
from midweek.domain.value.common import RootValueObject


class AttendanceGroup(DomainModel):
    """Votes sharing one attendance value.

    ``users`` and ``users_with_min_players`` are aligned by position and
    keep vote creation order.
    """

    count: int = Field(default=0, ge=0)
    users: list[str] = Field(default_factory=list)
    users_with_min_players: list[VoterEntry] = Field(default_factory=list)
    total_players: int = Field(default=0, ge=0)


class VoteSummary(RootValueObject[dict[Attendance, AttendanceGroup]]):
    """Attendance groups keyed by attendance value.

    Serializes as ``{"yes": {...}, "no": {...}}``.
    """

    def __getitem__(self, attendance: Attendance) -> AttendanceGroup:
        return self.root[attendance]

    @property
    def yes(self) -> AttendanceGroup:
        return self.root[Attendance.YES]

    @property
    def no(self) -> AttendanceGroup:
        return self.root[Attendance.NO]

    @property
    def total_players(self) -> int:
        """Headcount over all attending groups."""
        return sum(group.total_players for group in self.root.values())
