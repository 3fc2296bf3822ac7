"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from toolhub.config import AuthSettings, CommunitySettings, ScoringSettings, Settings
from toolhub.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_community_settings(self, settings: Settings) -> CommunitySettings:
        """Provide thread and comment limits."""
        return settings.community

    @provide(scope=Scope.APP)
    def provide_scoring_settings(self, settings: Settings) -> ScoringSettings:
        """Provide score aggregation settings."""
        return settings.scoring
