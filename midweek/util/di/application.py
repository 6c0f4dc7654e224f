"""Application layer DI providers."""

from dishka import Scope, provide

from midweek.application.usecase.calendar import (
    ExtendWednesdaysUseCase,
    GetWednesdaysUseCase,
)
from midweek.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentsUseCase,
)
from midweek.application.usecase.vote import CastVoteUseCase, GetVotesUseCase
from midweek.domain.service import CalendarService, CommentService, VoteService
from midweek.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Calendar use cases
    @provide(scope=Scope.REQUEST)
    def get_get_wednesdays_use_case(
        self, calendar_service: CalendarService
    ) -> GetWednesdaysUseCase:
        """Provide get wednesdays use case."""
        return GetWednesdaysUseCase(calendar_service=calendar_service)

    @provide(scope=Scope.REQUEST)
    def get_extend_wednesdays_use_case(
        self, calendar_service: CalendarService
    ) -> ExtendWednesdaysUseCase:
        """Provide extend wednesdays use case."""
        return ExtendWednesdaysUseCase(calendar_service=calendar_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_get_votes_use_case(
        self, vote_service: VoteService, calendar_service: CalendarService
    ) -> GetVotesUseCase:
        """Provide get votes use case."""
        return GetVotesUseCase(
            vote_service=vote_service, calendar_service=calendar_service
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)
