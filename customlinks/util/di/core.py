"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from customlinks.config import AuthSettings, Settings
from customlinks.domain.value import AuthorizationPolicy
from customlinks.util.di.base import ProviderBase


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
    def provide_authorization_policy(
        self, auth_settings: AuthSettings
    ) -> AuthorizationPolicy:
        """Provide the user/domain allow-lists."""
        return AuthorizationPolicy(
            users=auth_settings.users, domains=auth_settings.domains
        )
