"""Application layer DI providers."""

from dishka import Scope, provide

from customlinks.application.usecase.auth import GetCurrentUserUseCase, LoginUseCase
from customlinks.application.usecase.link import (
    ChangeOwnerUseCase,
    CreateLinkUseCase,
    DeleteLinkUseCase,
    GetLinkInfoUseCase,
    ListLinksUseCase,
    ResolveLinkUseCase,
    UpdateTargetUseCase,
)
from customlinks.domain.service import AuthService, LinkService, SessionService
from customlinks.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_login_use_case(
        self, auth_service: AuthService, session_service: SessionService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(
            auth_service=auth_service, session_service=session_service
        )

    @provide
    def get_current_user_use_case(
        self, session_service: SessionService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(session_service=session_service)

    # Link use cases
    @provide
    def get_create_link_use_case(self, link_service: LinkService) -> CreateLinkUseCase:
        return CreateLinkUseCase(link_service=link_service)

    @provide
    def get_link_info_use_case(self, link_service: LinkService) -> GetLinkInfoUseCase:
        return GetLinkInfoUseCase(link_service=link_service)

    @provide
    def get_resolve_link_use_case(
        self, link_service: LinkService
    ) -> ResolveLinkUseCase:
        return ResolveLinkUseCase(link_service=link_service)

    @provide
    def get_update_target_use_case(
        self, link_service: LinkService
    ) -> UpdateTargetUseCase:
        return UpdateTargetUseCase(link_service=link_service)

    @provide
    def get_change_owner_use_case(
        self, link_service: LinkService
    ) -> ChangeOwnerUseCase:
        return ChangeOwnerUseCase(link_service=link_service)

    @provide
    def get_delete_link_use_case(self, link_service: LinkService) -> DeleteLinkUseCase:
        return DeleteLinkUseCase(link_service=link_service)

    @provide
    def get_list_links_use_case(self, link_service: LinkService) -> ListLinksUseCase:
        return ListLinksUseCase(link_service=link_service)
