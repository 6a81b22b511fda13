"""Authentication routes."""

import logging
import secrets

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel

from customlinks.adapter.error import ProviderError
from customlinks.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
)
from customlinks.config import Settings
from customlinks.domain.error import AccessDeniedError
from customlinks.domain.service import AuthService
from customlinks.interface.api.session import (
    STATE_COOKIE,
    clear_session_cookie,
    require_user_id,
    set_session_cookie,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["authentication"], route_class=DishkaRoute)


class IdResponse(BaseModel):
    """Current user response."""

    id: str


@router.get("/id", response_model=IdResponse)
async def get_current_user_id(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> IdResponse:
    """Return the session user's ID.

    Raises:
        HTTPException: 401 if not logged in
    """
    user_id = await require_user_id(get_current_user_use_case, auth_token)
    return IdResponse(id=user_id)


@router.get("/auth/{provider}")
async def initiate_login(
    provider: str,
    auth_service: FromDishka[AuthService],
    settings: FromDishka[Settings],
) -> RedirectResponse:
    """Send the browser to the provider's login page.

    A random state is stored in a short-lived cookie and checked on the
    callback.

    Raises:
        HTTPException: 404 if the provider is not configured
    """
    state = secrets.token_urlsafe(32)
    try:
        auth_url = auth_service.initiate_login(provider, state)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    logger.info(f"Initiating {provider} login")
    response = RedirectResponse(url=auth_url, status_code=status.HTTP_302_FOUND)
    response.set_cookie(
        key=STATE_COOKIE,
        value=state,
        httponly=True,
        secure=settings.environment == "production",
        samesite="lax",
        path="/auth",
        max_age=10 * 60,
    )
    return response


@router.get("/auth/{provider}/callback")
async def login_callback(
    provider: str,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
    code: str | None = None,
    state: str | None = None,
    auth_state: str | None = Cookie(default=None),
) -> RedirectResponse:
    """Complete a provider login, set the session cookie and go home.

    Raises:
        HTTPException: 400 on a state mismatch, 401 if the identity is not
            authorized, 404 for an unconfigured provider, 500 if the
            provider fails
    """
    logger.info(f"Login callback received: provider={provider}")

    if not state or not auth_state or not secrets.compare_digest(state, auth_state):
        logger.warning(f"Login state mismatch for {provider}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Login state mismatch; please log in again",
        )

    try:
        login_response = await login_use_case.execute(
            LoginRequest(provider=provider, code=code, state=state)
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except AccessDeniedError as e:
        logger.warning(f"Login denied for {provider}: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=f"Access denied: {e}"
        )
    except ProviderError as e:
        logger.error(f"Provider error during {provider} callback: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"authentication with {provider} failed",
        )

    logger.info(f"Login successful for user: {login_response.user_id}")
    response = RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)
    set_session_cookie(response, login_response.token, settings)
    response.delete_cookie(key=STATE_COOKIE, path="/auth")
    return response


@router.get("/logout")
async def logout() -> RedirectResponse:
    """Clear the session cookie and go home."""
    response = RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)
    clear_session_cookie(response)
    return response
