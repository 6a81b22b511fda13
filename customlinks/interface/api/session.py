"""Session cookie helpers shared by route modules."""

from fastapi import HTTPException, Response, status

from customlinks.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from customlinks.config import Settings
from customlinks.domain.error import AccessDeniedError

SESSION_COOKIE = "auth_token"
STATE_COOKIE = "auth_state"


async def require_user_id(
    get_current_user_use_case: GetCurrentUserUseCase, auth_token: str | None
) -> str:
    """Resolve the session cookie to a user ID.

    Raises:
        HTTPException: 401 if the session is missing or no longer valid
    """
    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
    except AccessDeniedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Access denied: {e}",
        )
    return user.user_id


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the session token to a response.

    A ``None`` session_max_age gives a browser-session cookie.
    """
    response.set_cookie(
        key=SESSION_COOKIE,
        value=token,
        httponly=True,
        secure=settings.environment == "production",
        samesite="lax",
        path="/",
        max_age=settings.auth.session_max_age,
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(key=SESSION_COOKIE, path="/")
