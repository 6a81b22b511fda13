"""Get current user use case."""

from datetime import datetime

from pydantic import BaseModel

from customlinks.domain.service import SessionService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str | None  # Session token from cookie


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    created_at: datetime | None


class GetCurrentUserUseCase:
    """Use case for getting the session user."""

    def __init__(self, session_service: SessionService) -> None:
        self.session_service = session_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Resolve the session token to a user.

        Raises:
            AccessDeniedError: If the token is missing or invalid, or the user
                no longer exists
        """
        user = await self.session_service.user_from_token(request.token)
        return GetCurrentUserResponse(user_id=user.id, created_at=user.created_at)
