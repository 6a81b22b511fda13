"""In-memory user repository for testing and offline use."""

from typing import Optional

from customlinks.domain.model.user import User
from customlinks.domain.repository.user import UserRepository
from customlinks.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def exists(self, user_id: UserId) -> bool:
        """Check whether a user exists."""
        return user_id in self._users

    async def find_or_create(self, user_id: UserId) -> User:
        """Return the user, creating it on first sight."""
        user = self._users.get(user_id)
        if user is None:
            user = User(id=user_id)
            self._users[user.id] = user
        return user
