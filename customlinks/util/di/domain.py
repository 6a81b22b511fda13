"""Domain layer DI providers."""

from dishka import Scope, provide

from customlinks.config import AuthSettings
from customlinks.domain.repository import LinkRepository, UserRepository
from customlinks.domain.service import (
    AuthService,
    IdentityAdapter,
    LinkService,
    SessionService,
    VerificationService,
)
from customlinks.domain.value import AuthorizationPolicy
from customlinks.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_link_service(self, link_repository: LinkRepository) -> LinkService:
        """Provide link domain service."""
        return LinkService(link_repository=link_repository)

    @provide
    def get_verification_service(
        self, user_repository: UserRepository
    ) -> VerificationService:
        """Provide identity verification domain service."""
        return VerificationService(user_repository=user_repository)

    @provide
    def get_auth_service(
        self,
        identity_adapters: dict[str, IdentityAdapter],
        verification_service: VerificationService,
        policy: AuthorizationPolicy,
    ) -> AuthService:
        """Provide multi-provider authentication domain service."""
        return AuthService(
            adapters=identity_adapters,
            verification_service=verification_service,
            policy=policy,
        )

    @provide
    def get_session_service(
        self,
        user_repository: UserRepository,
        auth_settings: AuthSettings,
        identity_adapters: dict[str, IdentityAdapter],
    ) -> SessionService:
        """Provide session domain service.

        With no identity providers configured, sessions run in open mode.
        """
        return SessionService(
            user_repository=user_repository,
            auth_settings=auth_settings,
            open_mode=not identity_adapters,
        )
