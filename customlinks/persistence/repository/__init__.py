"""PostgreSQL repository implementations."""

from .link import PostgresLinkRepository
from .user import PostgresUserRepository

__all__ = [
    "PostgresLinkRepository",
    "PostgresUserRepository",
]
