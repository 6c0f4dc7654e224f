"""Core DI providers (non-mockable)."""

from zoneinfo import ZoneInfoNotFoundError

from dishka import Scope, provide

from midweek.config import Settings, VotingSettings
from midweek.domain.service import Clock
from midweek.util.di.base import ProviderBase
from midweek.util.error import ConfigurationError


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_voting_settings(self, settings: Settings) -> VotingSettings:
        """Provide voting settings."""
        return settings.voting

    @provide(scope=Scope.APP)
    def provide_clock(self, voting_settings: VotingSettings) -> Clock:
        """Provide wall clock in the configured timezone.

        Raises:
            ConfigurationError: If VOTING__TIMEZONE is not a known IANA zone
        """
        try:
            return Clock(voting_settings.timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigurationError(
                "VOTING__TIMEZONE", f"unknown timezone {voting_settings.timezone!r}"
            ) from e
