"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from customlinks.domain.model import User
from customlinks.domain.repository import UserRepository
from customlinks.domain.value import UserId
from customlinks.persistence.mappers import row_to_user
from customlinks.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def exists(self, user_id: UserId) -> bool:
        """Check whether a user exists.

        Args:
            user_id: User ID to look up

        Returns:
            True if the user exists
        """
        stmt = select(users_table.c.id).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def find_or_create(self, user_id: UserId) -> User:
        """Return the user, inserting the record on first sight.

        Args:
            user_id: Verified user ID

        Returns:
            Stored user
        """
        stmt = (
            insert(users_table)
            .values(id=user_id)
            .on_conflict_do_nothing(index_elements=[users_table.c.id])
        )
        await self.session.execute(stmt)
        await self.session.flush()

        user = await self.find_by_id(user_id)
        if user is None:
            raise RuntimeError(f"User {user_id} missing after insert")
        return user
