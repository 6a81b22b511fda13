"""Interface layer errors and HTTP status mapping."""

from fastapi import status

from customlinks.domain.error import (
    AccessDeniedError,
    AlreadyExistsError,
    DomainError,
    ForbiddenError,
    InvalidLinkError,
    InvalidTargetError,
    NotFoundError,
)


# Checked in order; first matching type wins
DOMAIN_ERROR_STATUS: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (AlreadyExistsError, status.HTTP_403_FORBIDDEN),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (InvalidLinkError, status.HTTP_400_BAD_REQUEST),
    (InvalidTargetError, status.HTTP_400_BAD_REQUEST),
    (AccessDeniedError, status.HTTP_401_UNAUTHORIZED),
]


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error."""
    for error_type, code in DOMAIN_ERROR_STATUS:
        if isinstance(error, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST
