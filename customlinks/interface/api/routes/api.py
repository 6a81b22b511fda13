"""Link API routes."""

import logging

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel

from customlinks.application import message
from customlinks.application.usecase.auth import GetCurrentUserUseCase
from customlinks.application.usecase.link import (
    ChangeOwnerRequest,
    ChangeOwnerResponse,
    ChangeOwnerUseCase,
    CreateLinkRequest,
    CreateLinkResponse,
    CreateLinkUseCase,
    DeleteLinkRequest,
    DeleteLinkResponse,
    DeleteLinkUseCase,
    GetLinkInfoRequest,
    GetLinkInfoResponse,
    GetLinkInfoUseCase,
    ListLinksRequest,
    ListLinksResponse,
    ListLinksUseCase,
    UpdateTargetRequest,
    UpdateTargetResponse,
    UpdateTargetUseCase,
)
from customlinks.config import Settings
from customlinks.domain.error import DomainError
from customlinks.domain.value import LinkKey
from customlinks.interface.api.session import require_user_id
from customlinks.interface.error import status_for

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["links"], route_class=DishkaRoute)


class TargetAPIRequest(BaseModel):
    """API request carrying a redirect target."""

    target: str = ""


class OwnerAPIRequest(BaseModel):
    """API request carrying a new owner."""

    owner: str = ""


def _domain_failure(error: DomainError, origin: str) -> HTTPException:
    return HTTPException(
        status_code=status_for(error), detail=message.describe_error(error, origin)
    )


def _server_failure(link: str, verb: str, origin: str, error: Exception) -> HTTPException:
    logger.exception(f"Server error on {link}: {error}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=message.server_error(LinkKey.normalize(link), verb, origin),
    )


@router.get("/info/{link:path}", response_model=GetLinkInfoResponse)
async def get_link_info(
    link: str,
    get_link_info_use_case: FromDishka[GetLinkInfoUseCase],
    settings: FromDishka[Settings],
) -> GetLinkInfoResponse:
    """Get a link's target, owner and click count without counting a click.

    Raises:
        HTTPException: 404 if the link doesn't exist, 500 on backend failure
    """
    try:
        return await get_link_info_use_case.execute(GetLinkInfoRequest(link=link))
    except DomainError as e:
        raise _domain_failure(e, settings.api.base_url)
    except Exception as e:
        logger.exception(f"Failed to read info for {link}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal Server Error",
        )


@router.get("/links", response_model=ListLinksResponse)
async def list_links(
    list_links_use_case: FromDishka[ListLinksUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
    auth_token: str | None = Cookie(default=None),
) -> ListLinksResponse:
    """List the caller's links.

    Requires authentication.
    """
    user_id = await require_user_id(get_current_user_use_case, auth_token)
    return await list_links_use_case.execute(
        ListLinksRequest(owner=user_id, origin=settings.api.base_url)
    )


@router.post(
    "/create/{link:path}",
    response_model=CreateLinkResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_link(
    link: str,
    request: TargetAPIRequest,
    create_link_use_case: FromDishka[CreateLinkUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
    auth_token: str | None = Cookie(default=None),
) -> CreateLinkResponse:
    """Create a link owned by the caller.

    Requires authentication.

    Args:
        link: Custom link, with or without leading slash
        request: Redirect target
        create_link_use_case: Create link use case from DI
        get_current_user_use_case: Get current user use case from DI
        settings: Application settings from DI
        auth_token: Session token from cookie

    Returns:
        The new link and a confirmation message

    Raises:
        HTTPException: 400 for an invalid link or target, 403 if the link
            exists, 500 on backend failure
    """
    user_id = await require_user_id(get_current_user_use_case, auth_token)
    origin = settings.api.base_url

    try:
        return await create_link_use_case.execute(
            CreateLinkRequest(
                link=link, target=request.target, owner=user_id, origin=origin
            )
        )
    except DomainError as e:
        logfire.warn("Link creation rejected", link=link, error=str(e))
        raise _domain_failure(e, origin)
    except Exception as e:
        raise _server_failure(link, "created", origin, e)


@router.post("/target/{link:path}", response_model=UpdateTargetResponse)
async def update_target(
    link: str,
    request: TargetAPIRequest,
    update_target_use_case: FromDishka[UpdateTargetUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
    auth_token: str | None = Cookie(default=None),
) -> UpdateTargetResponse:
    """Point one of the caller's links at a new target.

    Requires authentication. Only the owner may change the target.
    """
    user_id = await require_user_id(get_current_user_use_case, auth_token)
    origin = settings.api.base_url

    try:
        return await update_target_use_case.execute(
            UpdateTargetRequest(
                link=link, target=request.target, user_id=user_id, origin=origin
            )
        )
    except DomainError as e:
        logfire.warn("Target update rejected", link=link, error=str(e))
        raise _domain_failure(e, origin)
    except Exception as e:
        raise _server_failure(link, "updated", origin, e)


@router.post("/owner/{link:path}", response_model=ChangeOwnerResponse)
async def change_owner(
    link: str,
    request: OwnerAPIRequest,
    change_owner_use_case: FromDishka[ChangeOwnerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
    auth_token: str | None = Cookie(default=None),
) -> ChangeOwnerResponse:
    """Transfer one of the caller's links to another user.

    Requires authentication. Only the owner may transfer a link.
    """
    user_id = await require_user_id(get_current_user_use_case, auth_token)
    origin = settings.api.base_url

    if not request.owner.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="New owner field must not be empty.",
        )

    try:
        return await change_owner_use_case.execute(
            ChangeOwnerRequest(
                link=link, owner=request.owner, user_id=user_id, origin=origin
            )
        )
    except DomainError as e:
        logfire.warn("Owner change rejected", link=link, error=str(e))
        raise _domain_failure(e, origin)
    except Exception as e:
        raise _server_failure(link, "transferred", origin, e)


@router.delete("/delete/{link:path}", response_model=DeleteLinkResponse)
async def delete_link(
    link: str,
    delete_link_use_case: FromDishka[DeleteLinkUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
    auth_token: str | None = Cookie(default=None),
) -> DeleteLinkResponse:
    """Delete one of the caller's links.

    Requires authentication. Only the owner may delete a link.
    """
    user_id = await require_user_id(get_current_user_use_case, auth_token)
    origin = settings.api.base_url

    try:
        return await delete_link_use_case.execute(
            DeleteLinkRequest(link=link, user_id=user_id, origin=origin)
        )
    except DomainError as e:
        logfire.warn("Link deletion rejected", link=link, error=str(e))
        raise _domain_failure(e, origin)
    except Exception as e:
        raise _server_failure(link, "deleted", origin, e)


@router.api_route(
    "/{rest:path}", methods=["GET", "POST", "PUT", "PATCH", "DELETE"]
)
async def unknown_endpoint(rest: str) -> None:
    """Reject any other API request."""
    logger.info(f"Unknown API request: /api/{rest}")
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Bad Request")
