"""Unit tests for VoteService."""

from datetime import date

import pytest

from midweek.config import VotingSettings
from midweek.domain.error import ValidationError
from midweek.domain.repository import VoteRepository
from midweek.domain.service import VoteService
from midweek.domain.value import Attendance, MinPlayers, UserName
from midweek.persistence.repository.inmemory import InMemoryVoteRepository
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestCastVote:
    """Tests for cast_vote method."""

    @pytest.mark.asyncio
    async def test_first_vote_is_stored(self, unit_env, wednesday):
        """A first vote should be stored with equal created and updated times."""
        # Arrange
        vote_service = await unit_env.get(VoteService)

        # Act
        vote = await vote_service.cast_vote(
            UserName("Alice"), wednesday, Attendance.YES, MinPlayers.SIX, guests=2
        )

        # Assert
        assert vote.user_name == UserName("Alice")
        assert vote.attendance == Attendance.YES
        assert vote.min_players == MinPlayers.SIX
        assert vote.guests == 2
        assert vote.created_at == vote.updated_at

    @pytest.mark.asyncio
    async def test_revote_overwrites_in_place(self, unit_env, wednesday):
        """Voting again should update the same vote, keeping id and created_at."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        first = await vote_service.cast_vote(
            UserName("Alice"), wednesday, Attendance.YES, MinPlayers.ANY, guests=1
        )

        # Act
        second = await vote_service.cast_vote(
            UserName("Alice"), wednesday, Attendance.NO, MinPlayers.EIGHT
        )

        # Assert
        assert second.id == first.id
        assert second.created_at == first.created_at
        assert second.updated_at >= first.updated_at
        assert second.attendance == Attendance.NO
        assert second.min_players == MinPlayers.EIGHT
        assert second.guests == 0

        stored = await vote_repo.find_by_date(wednesday)
        assert stored == [second]

    @pytest.mark.asyncio
    async def test_identical_revote_is_idempotent(self, unit_env, wednesday):
        """Repeating the same vote leaves one stored vote with the original created_at."""
        vote_service = await unit_env.get(VoteService)
        args = (UserName("Alice"), wednesday, Attendance.YES, MinPlayers.ANY, 1)

        first = await vote_service.cast_vote(*args)
        second = await vote_service.cast_vote(*args)

        votes = await vote_service.get_votes_for_date(wednesday)
        assert len(votes) == 1
        assert second.created_at == first.created_at
        assert (second.attendance, second.guests) == (first.attendance, first.guests)

    @pytest.mark.asyncio
    async def test_names_are_independent(self, unit_env, wednesday):
        """Different names each hold their own vote."""
        vote_service = await unit_env.get(VoteService)

        await vote_service.cast_vote(
            UserName("Alice"), wednesday, Attendance.YES, MinPlayers.ANY
        )
        await vote_service.cast_vote(
            UserName("Bob"), wednesday, Attendance.NO, MinPlayers.ANY
        )

        votes = await vote_service.get_votes_for_date(wednesday)
        assert [v.user_name.root for v in votes] == ["Alice", "Bob"]

    @pytest.mark.asyncio
    async def test_non_wednesday_is_rejected(self, unit_env):
        """Votes for other weekdays should be rejected."""
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(ValidationError, match="2026-10-22 is not a Wednesday"):
            await vote_service.cast_vote(
                UserName("Alice"), date(2026, 10, 22), Attendance.YES, MinPlayers.ANY
            )

    @pytest.mark.asyncio
    async def test_non_wednesday_allowed_when_not_enforced(self):
        """Switching enforcement off accepts any date."""
        vote_service = VoteService(
            vote_repository=InMemoryVoteRepository(),
            voting_settings=VotingSettings(enforce_wednesday=False),
        )

        vote = await vote_service.cast_vote(
            UserName("Alice"), date(2026, 10, 22), Attendance.YES, MinPlayers.ANY
        )

        assert vote.vote_date == date(2026, 10, 22)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("guests", [-1, 11])
    async def test_guests_out_of_range_are_rejected(self, unit_env, wednesday, guests):
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(ValidationError, match="Guests must be between 0 and 10"):
            await vote_service.cast_vote(
                UserName("Alice"), wednesday, Attendance.YES, MinPlayers.ANY, guests
            )

    @pytest.mark.asyncio
    async def test_lower_configured_guest_limit_applies(self, wednesday):
        vote_service = VoteService(
            vote_repository=InMemoryVoteRepository(),
            voting_settings=VotingSettings(max_guests=2),
        )

        with pytest.raises(ValidationError, match="between 0 and 2"):
            await vote_service.cast_vote(
                UserName("Alice"), wednesday, Attendance.YES, MinPlayers.ANY, 3
            )


class TestReadVotes:
    """Tests for vote read methods."""

    @pytest.mark.asyncio
    async def test_get_vote_returns_none_for_unknown_name(self, unit_env, wednesday):
        vote_service = await unit_env.get(VoteService)

        assert await vote_service.get_vote(UserName("Nobody"), wednesday) is None

    @pytest.mark.asyncio
    async def test_get_votes_with_summary(self, unit_env, wednesday):
        """Summary should reflect the latest vote of every name."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        await vote_service.cast_vote(
            UserName("Alice"), wednesday, Attendance.YES, MinPlayers.SIX, 2
        )
        await vote_service.cast_vote(
            UserName("Bob"), wednesday, Attendance.YES, MinPlayers.ANY
        )
        await vote_service.cast_vote(
            UserName("Bob"), wednesday, Attendance.NO, MinPlayers.ANY
        )

        # Act
        votes, summary = await vote_service.get_votes_with_summary(wednesday)

        # Assert
        assert len(votes) == 2
        assert summary.yes.users == ["Alice"]
        assert summary.no.users == ["Bob"]
        assert summary.total_players == 3

    @pytest.mark.asyncio
    async def test_dates_are_independent(self, unit_env, wednesday):
        vote_service = await unit_env.get(VoteService)
        await vote_service.cast_vote(
            UserName("Alice"), wednesday, Attendance.YES, MinPlayers.ANY
        )

        votes, summary = await vote_service.get_votes_with_summary(date(2026, 10, 28))

        assert votes == []
        assert summary.yes.count == 0
