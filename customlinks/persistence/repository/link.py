"""PostgreSQL implementation of Link repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from customlinks.domain.error import AlreadyExistsError
from customlinks.domain.model import Link
from customlinks.domain.repository import LinkRepository
from customlinks.domain.value import LinkKey, Target, UserId
from customlinks.persistence.mappers import link_to_dict, row_to_link
from customlinks.persistence.tables import links_table


class PostgresLinkRepository(LinkRepository):
    """PostgreSQL implementation of LinkRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_key(self, key: LinkKey) -> Optional[Link]:
        """Find a link by its canonical key.

        Args:
            key: Canonical link key

        Returns:
            Link if found, None otherwise
        """
        stmt = select(links_table).where(links_table.c.key == key.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_link(dict(row)) if row else None

    async def find_by_owner(self, owner: UserId) -> List[Link]:
        """Find all links owned by a user, ordered by key.

        Args:
            owner: Owner's user ID

        Returns:
            List of links
        """
        stmt = (
            select(links_table)
            .where(links_table.c.owner == owner)
            .order_by(links_table.c.key)
        )
        result = await self.session.execute(stmt)
        return [row_to_link(dict(row)) for row in result.mappings().all()]

    async def save(self, link: Link, insert_only: bool = False) -> Link:
        """Save a link.

        Inserts use ON CONFLICT so concurrent creates of one key have a
        single winner. Overwrites never touch clicks or created_at.

        Args:
            link: Link to save
            insert_only: If True, fail instead of overwriting

        Returns:
            Saved link as stored

        Raises:
            AlreadyExistsError: If insert_only and the key is taken
        """
        link_dict = link_to_dict(link)
        stmt = insert(links_table).values(**link_dict)

        if insert_only:
            stmt = stmt.on_conflict_do_nothing(index_elements=[links_table.c.key])
        else:
            stmt = stmt.on_conflict_do_update(
                index_elements=[links_table.c.key],
                set_={
                    "target": stmt.excluded.target,
                    "owner": stmt.excluded.owner,
                    "updated_at": stmt.excluded.updated_at,
                },
            )

        result = await self.session.execute(stmt.returning(*links_table.c))
        row = result.mappings().first()
        await self.session.flush()

        if row is None:
            raise AlreadyExistsError(link.key)
        return row_to_link(dict(row))

    async def update_target(
        self,
        key: LinkKey,
        target: Target,
        expected_owner: UserId,
        updated_at: datetime,
    ) -> Optional[Link]:
        """Set the target with one UPDATE guarded on the current owner."""
        return await self._guarded_update(
            key, expected_owner, target=target.root, updated_at=updated_at
        )

    async def update_owner(
        self,
        key: LinkKey,
        new_owner: UserId,
        expected_owner: UserId,
        updated_at: datetime,
    ) -> Optional[Link]:
        """Transfer the link with one UPDATE guarded on the current owner."""
        return await self._guarded_update(
            key, expected_owner, owner=new_owner, updated_at=updated_at
        )

    async def _guarded_update(
        self, key: LinkKey, expected_owner: UserId, **values
    ) -> Optional[Link]:
        stmt = (
            links_table.update()
            .where(links_table.c.key == key.root)
            .where(links_table.c.owner == expected_owner)
            .values(**values)
            .returning(*links_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_link(dict(row)) if row else None

    async def delete(self, key: LinkKey, owner: Optional[UserId] = None) -> bool:
        """Delete a link.

        Args:
            key: Canonical link key
            owner: If given, only delete while the row has this owner

        Returns:
            True if a row was removed
        """
        stmt = links_table.delete().where(links_table.c.key == key.root)
        if owner is not None:
            stmt = stmt.where(links_table.c.owner == owner)
        stmt = stmt.returning(links_table.c.key)
        result = await self.session.execute(stmt)
        deleted = result.first() is not None
        await self.session.flush()
        return deleted

    async def increment_clicks(self, key: LinkKey) -> Optional[Link]:
        """Atomically increment a link's click count by 1.

        Uses a single SQL-level UPDATE so concurrent increments serialize
        on the row lock.

        Args:
            key: Canonical link key

        Returns:
            Updated link, or None if the key doesn't exist
        """
        stmt = (
            links_table.update()
            .where(links_table.c.key == key.root)
            .values(clicks=links_table.c.clicks + 1)
            .returning(*links_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_link(dict(row)) if row else None
