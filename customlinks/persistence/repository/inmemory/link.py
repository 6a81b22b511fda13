"""In-memory link repository for testing and offline use."""

from datetime import datetime
from typing import List, Optional

from customlinks.domain.error import AlreadyExistsError
from customlinks.domain.model.link import Link
from customlinks.domain.repository.link import LinkRepository
from customlinks.domain.value import LinkKey, Target, UserId


class InMemoryLinkRepository(LinkRepository):
    """In-memory implementation of LinkRepository.

    No method awaits between reading and writing the store, so each
    operation is atomic on the event loop.
    """

    def __init__(self) -> None:
        self._links: dict[str, Link] = {}

    async def find_by_key(self, key: LinkKey) -> Optional[Link]:
        """Find a link by its canonical key."""
        return self._links.get(key.root)

    async def find_by_owner(self, owner: UserId) -> List[Link]:
        """Find all links owned by a user, ordered by key."""
        return sorted(
            (link for link in self._links.values() if link.owner == owner),
            key=lambda link: link.key.root,
        )

    async def save(self, link: Link, insert_only: bool = False) -> Link:
        """Save a link; overwrites keep the stored clicks and created_at."""
        existing = self._links.get(link.key.root)
        if existing is not None:
            if insert_only:
                raise AlreadyExistsError(link.key)
            link = link.model_copy(
                update={"clicks": existing.clicks, "created_at": existing.created_at}
            )
        self._links[link.key.root] = link
        return link

    async def update_target(
        self,
        key: LinkKey,
        target: Target,
        expected_owner: UserId,
        updated_at: datetime,
    ) -> Optional[Link]:
        """Set the target if the link still has the expected owner."""
        return self._guarded_update(
            key, expected_owner, {"target": target, "updated_at": updated_at}
        )

    async def update_owner(
        self,
        key: LinkKey,
        new_owner: UserId,
        expected_owner: UserId,
        updated_at: datetime,
    ) -> Optional[Link]:
        """Transfer the link if it still has the expected owner."""
        return self._guarded_update(
            key, expected_owner, {"owner": new_owner, "updated_at": updated_at}
        )

    def _guarded_update(
        self, key: LinkKey, expected_owner: UserId, changes: dict
    ) -> Optional[Link]:
        link = self._links.get(key.root)
        if link is None or link.owner != expected_owner:
            return None
        updated = link.model_copy(update=changes)
        self._links[key.root] = updated
        return updated

    async def delete(self, key: LinkKey, owner: Optional[UserId] = None) -> bool:
        """Delete a link, optionally only while it has the given owner."""
        link = self._links.get(key.root)
        if link is None or (owner is not None and link.owner != owner):
            return False
        del self._links[key.root]
        return True

    async def increment_clicks(self, key: LinkKey) -> Optional[Link]:
        """Atomically increment a link's click count by 1."""
        link = self._links.get(key.root)
        if link is None:
            return None
        updated = link.model_copy(update={"clicks": link.clicks + 1})
        self._links[key.root] = updated
        return updated
