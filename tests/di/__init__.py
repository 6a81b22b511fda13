"""Mock providers for testing."""

from .persistence import FailingUserRepository, MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "FailingUserRepository",
    "MockPersistenceProvider",
    "build_test_container",
]
