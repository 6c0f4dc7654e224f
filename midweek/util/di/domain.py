"""Domain layer DI providers."""

from dishka import Scope, provide

from midweek.config import VotingSettings
from midweek.domain.repository import CommentRepository, VoteRepository
from midweek.domain.service import (
    CalendarService,
    Clock,
    CommentService,
    VoteService,
)
from midweek.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_calendar_service(
        self, voting_settings: VotingSettings, clock: Clock
    ) -> CalendarService:
        """Provide calendar domain service."""
        return CalendarService(voting_settings=voting_settings, clock=clock)

    @provide
    def get_vote_service(
        self, vote_repository: VoteRepository, voting_settings: VotingSettings
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository, voting_settings=voting_settings
        )

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, voting_settings: VotingSettings
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, voting_settings=voting_settings
        )
