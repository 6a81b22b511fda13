"""Session identity domain service."""

import logfire

from customlinks.config import AuthSettings
from customlinks.domain.error import AccessDeniedError
from customlinks.domain.model.user import User
from customlinks.domain.repository import UserRepository
from customlinks.domain.value.identifiers import normalize_user_id
from customlinks.util.token import TokenError, create_token, verify_token

from .base import Service


class SessionService(Service):
    """Domain service persisting user identity across requests.

    A session stores only the user ID. Reading it back re-checks that the
    user record still exists, so removing a user ends their sessions.
    Any failure reading a session is a denial, never an error.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        auth_settings: AuthSettings,
        open_mode: bool = False,
    ) -> None:
        """Initialize session service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings
            open_mode: True when no identity provider is configured; sessions
                then resolve straight from the stored user record
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings
        self.open_mode = open_mode

    def serialize(self, user: User) -> str:
        """Project a user to the value stored in the session."""
        return user.id

    async def deserialize(self, user_id: str) -> User:
        """Rebuild the session user.

        Args:
            user_id: Serialized user ID

        Returns:
            The session user

        Raises:
            AccessDeniedError: If the user doesn't exist or can't be checked
        """
        with logfire.span(
            "session_service.deserialize", user_id=user_id, open_mode=self.open_mode
        ):
            try:
                if self.open_mode:
                    user = await self.user_repository.find_by_id(
                        normalize_user_id(user_id)
                    )
                else:
                    exists = await self.user_repository.exists(
                        normalize_user_id(user_id)
                    )
                    user = User(id=user_id) if exists else None
            except Exception as e:
                logfire.error(
                    "Session user lookup failed", user_id=user_id, error=str(e)
                )
                raise AccessDeniedError(f"user {user_id} could not be verified") from e

            if user is None:
                logfire.warn("Session user no longer exists", user_id=user_id)
                raise AccessDeniedError(f"user {user_id} doesn't exist")
            return user

    def issue_token(self, user: User) -> str:
        """Create a signed session token for a user."""
        with logfire.span("session_service.issue_token", user_id=user.id):
            return create_token(self.serialize(user), self.auth_settings)

    async def user_from_token(self, token: str | None) -> User:
        """Resolve the user behind a session token.

        Raises:
            AccessDeniedError: If the token is missing, invalid or expired,
                or its user no longer exists
        """
        if not token:
            raise AccessDeniedError("not logged in")
        try:
            payload = verify_token(token, self.auth_settings)
        except TokenError as e:
            logfire.warn("Session token rejected", error=str(e))
            raise AccessDeniedError(str(e)) from e
        return await self.deserialize(payload.sub)
