"""Link repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from customlinks.domain.model.link import Link
from customlinks.domain.value import LinkKey, Target, UserId


class LinkRepository(ABC):
    """Repository for Link aggregate.

    Implementations must guarantee single-key atomicity for
    ``increment_clicks``, insert-only ``save`` and the owner-guarded writes
    (``update_target``, ``update_owner``, ``delete`` with an owner). A guarded
    write never inserts: it changes one existing row or nothing.
    """

    @abstractmethod
    async def find_by_key(self, key: LinkKey) -> Optional[Link]:
        """Find a link by its canonical key.

        Args:
            key: Canonical link key

        Returns:
            The link if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_owner(self, owner: UserId) -> List[Link]:
        """Find all links owned by a user, ordered by key.

        Args:
            owner: Owner's user ID

        Returns:
            List of links (may be empty)
        """
        pass

    @abstractmethod
    async def save(self, link: Link, insert_only: bool = False) -> Link:
        """Save a link.

        Args:
            link: Link to save
            insert_only: If True, fail instead of overwriting an existing key

        Returns:
            The saved link

        Raises:
            AlreadyExistsError: If insert_only and the key is already taken
        """
        pass

    @abstractmethod
    async def update_target(
        self,
        key: LinkKey,
        target: Target,
        expected_owner: UserId,
        updated_at: datetime,
    ) -> Optional[Link]:
        """Set a link's target if it is still owned by ``expected_owner``.

        Returns:
            The updated link, or None if the key is gone or changed hands
        """
        pass

    @abstractmethod
    async def update_owner(
        self,
        key: LinkKey,
        new_owner: UserId,
        expected_owner: UserId,
        updated_at: datetime,
    ) -> Optional[Link]:
        """Transfer a link if it is still owned by ``expected_owner``.

        Returns:
            The updated link, or None if the key is gone or changed hands
        """
        pass

    @abstractmethod
    async def delete(self, key: LinkKey, owner: Optional[UserId] = None) -> bool:
        """Delete a link.

        Args:
            key: Canonical link key
            owner: If given, only delete while the link has this owner

        Returns:
            True if a link was removed, False otherwise
        """
        pass

    @abstractmethod
    async def increment_clicks(self, key: LinkKey) -> Optional[Link]:
        """Atomically increment a link's click count by 1.

        Concurrent increments of the same key must never be lost.

        Args:
            key: Canonical link key

        Returns:
            The updated link, or None if the key doesn't exist
        """
        pass
