"""Link use cases."""

from .change_owner import ChangeOwnerRequest, ChangeOwnerResponse, ChangeOwnerUseCase
from .create_link import CreateLinkRequest, CreateLinkResponse, CreateLinkUseCase
from .delete_link import DeleteLinkRequest, DeleteLinkResponse, DeleteLinkUseCase
from .get_link_info import GetLinkInfoRequest, GetLinkInfoResponse, GetLinkInfoUseCase
from .list_links import ListLinksRequest, ListLinksResponse, ListLinksUseCase
from .resolve_link import ResolveLinkRequest, ResolveLinkResponse, ResolveLinkUseCase
from .update_target import (
    UpdateTargetRequest,
    UpdateTargetResponse,
    UpdateTargetUseCase,
)

__all__ = [
    "ChangeOwnerRequest",
    "ChangeOwnerResponse",
    "ChangeOwnerUseCase",
    "CreateLinkRequest",
    "CreateLinkResponse",
    "CreateLinkUseCase",
    "DeleteLinkRequest",
    "DeleteLinkResponse",
    "DeleteLinkUseCase",
    "GetLinkInfoRequest",
    "GetLinkInfoResponse",
    "GetLinkInfoUseCase",
    "ListLinksRequest",
    "ListLinksResponse",
    "ListLinksUseCase",
    "ResolveLinkRequest",
    "ResolveLinkResponse",
    "ResolveLinkUseCase",
    "UpdateTargetRequest",
    "UpdateTargetResponse",
    "UpdateTargetUseCase",
]
