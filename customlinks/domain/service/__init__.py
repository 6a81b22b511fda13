"""Domain services."""

from .auth_service import (
    AuthService,
    IdentityAdapter,
    VerificationResult,
    VerificationService,
    find_verified_id,
)
from .base import Service
from .link_service import LinkChange, LinkService
from .session_service import SessionService

__all__ = [
    "AuthService",
    "IdentityAdapter",
    "LinkChange",
    "LinkService",
    "Service",
    "SessionService",
    "VerificationResult",
    "VerificationService",
    "find_verified_id",
]
