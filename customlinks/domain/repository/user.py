"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from customlinks.domain.model.user import User
from customlinks.domain.value import UserId


class UserRepository(ABC):
    """Repository for verified users."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's verified identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists(self, user_id: UserId) -> bool:
        """Check whether a user record exists.

        Args:
            user_id: The user's verified identifier

        Returns:
            True if the user exists
        """
        pass

    @abstractmethod
    async def find_or_create(self, user_id: UserId) -> User:
        """Return the user with this ID, creating the record if needed.

        Args:
            user_id: The user's verified identifier

        Returns:
            The existing or newly created user
        """
        pass
