"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import delete, insert, select, update

from roster.domain.model import User
from roster.domain.repository import UserRepository
from roster.domain.value import UserId
from roster.persistence.mappers import row_to_user, user_to_dict
from roster.persistence.repository.base import PostgresRepository
from roster.persistence.tables import users_table


class PostgresUserRepository(PostgresRepository, UserRepository):
    """PostgreSQL implementation of UserRepository."""

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self._execute(stmt, "fetching user")
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_all(self) -> list[User]:
        """Find all users, oldest first."""
        stmt = select(users_table).order_by(users_table.c.created_at)
        result = await self._execute(stmt, "fetching users")
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def add(self, user: User) -> User:
        """Insert a user.

        Runs in a savepoint so a duplicate email does not poison the
        request transaction.
        """
        stmt = insert(users_table).values(**user_to_dict(user))
        await self._execute(stmt, "creating user", savepoint=True)
        return user

    async def update(self, user: User) -> Optional[User]:
        """Overwrite the mutable fields of a user.

        Returns:
            The user, or None if the row is gone
        """
        values = user_to_dict(user)
        # Identity and creation time never change
        values.pop("id")
        values.pop("created_at")

        stmt = (
            update(users_table).where(users_table.c.id == user.id).values(**values)
        )
        result = await self._execute(stmt, "updating user", savepoint=True)
        if result.rowcount == 0:  # type: ignore[attr-defined]
            return None
        return user

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user by ID."""
        stmt = delete(users_table).where(users_table.c.id == user_id)
        result = await self._execute(stmt, "deleting user")
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
