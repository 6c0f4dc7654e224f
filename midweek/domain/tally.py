"""Vote aggregation.

Turns the votes of one Wednesday into a :class:`VoteSummary`.
"""

from typing import Iterable

from midweek.domain.error import InvalidAttendanceValueError
from midweek.domain.model import AttendanceGroup, Vote, VoteSummary
from midweek.domain.value import Attendance, VoterEntry


def summarize(votes: Iterable[Vote]) -> VoteSummary:
    """Group votes by attendance.

    Every attendance value gets a group, empty ones included. Within a group
    voters keep the order of the input, which must be vote creation order.
    Each attending vote counts as the voter plus their guests.

    Args:
        votes: Votes for one date in creation order

    Returns:
        Summary with one group per attendance value

    Raises:
        InvalidAttendanceValueError: If a vote's attendance is not a known value
    """
    buckets: dict[Attendance, list[Vote]] = {attendance: [] for attendance in Attendance}

    for vote in votes:
        try:
            attendance = Attendance(vote.attendance)
        except ValueError:
            raise InvalidAttendanceValueError(vote.attendance) from None
        buckets[attendance].append(vote)

    return VoteSummary(
        {attendance: _group(attendance, bucket) for attendance, bucket in buckets.items()}
    )


def _group(attendance: Attendance, votes: list[Vote]) -> AttendanceGroup:
    total_players = 0
    if attendance.counts_toward_total:
        total_players = sum(1 + vote.guests for vote in votes)

    return AttendanceGroup(
        count=len(votes),
        users=[vote.user_name.root for vote in votes],
        users_with_min_players=[
            VoterEntry(
                name=vote.user_name.root,
                min_players=vote.min_players,
                guests=vote.guests,
            )
            for vote in votes
        ],
        total_players=total_players,
    )
