"""In-memory repository implementations for testing."""

from .link import InMemoryLinkRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryLinkRepository",
    "InMemoryUserRepository",
]
