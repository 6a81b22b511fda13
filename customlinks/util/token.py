"""Session token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from customlinks.config import AuthSettings

# Ceiling for browser-session tokens (session_max_age=None)
BROWSER_SESSION_MAX_AGE = timedelta(days=30)


class TokenPayload(BaseModel):
    """Session token payload."""

    sub: str  # Serialized user ID
    exp: datetime


class TokenError(Exception):
    """Session token error."""

    pass


def create_token(subject: str, settings: AuthSettings) -> str:
    """Create a signed session token.

    Args:
        subject: Serialized user ID
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    if settings.session_max_age is None:
        lifetime = BROWSER_SESSION_MAX_AGE
    else:
        lifetime = timedelta(seconds=settings.session_max_age)

    payload = {
        "sub": subject,
        "exp": datetime.now(timezone.utc) + lifetime,
    }

    return jwt.encode(
        payload, settings.session_secret, algorithm=settings.session_algorithm
    )


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a session token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        TokenError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.session_secret, algorithms=[settings.session_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise TokenError("Token has expired")
    except jwt.InvalidTokenError:
        raise TokenError("Invalid token")
