"""Login use case."""

import logfire
from pydantic import BaseModel

from customlinks.domain.error import AccessDeniedError
from customlinks.domain.service import AuthService, SessionService


class LoginRequest(BaseModel):
    """Login request from a provider callback."""

    provider: str  # Which provider is handling this login
    code: str | None = None  # OAuth authorization code
    state: str | None = None  # State parameter for CSRF verification


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    user_id: str


class LoginUseCase:
    """Use case for multi-provider login."""

    def __init__(
        self, auth_service: AuthService, session_service: SessionService
    ) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service (handles all providers)
            session_service: Session domain service
        """
        self.auth_service = auth_service
        self.session_service = session_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Steps:
        1. Fetch the provider payload and extract claimed identifiers
        2. Verify them against the authorization policy
        3. Find or create the user record
        4. Issue a session token

        Args:
            request: Login request with callback parameters

        Returns:
            Login response with session token and user ID

        Raises:
            ValueError: If the provider is not configured
            AccessDeniedError: If no claimed identifier is authorized
            ProviderError: If the provider can't be reached
        """
        result = await self.auth_service.complete_login(
            request.provider, request.code, request.state
        )

        if result.user is None:
            logfire.warn(
                "Login denied", provider=request.provider, reason=result.reason
            )
            raise AccessDeniedError(result.reason)

        token = self.session_service.issue_token(result.user)
        logfire.info("User logged in", provider=request.provider, user_id=result.user.id)
        return LoginResponse(token=token, user_id=result.user.id)
