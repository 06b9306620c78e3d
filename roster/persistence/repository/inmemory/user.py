"""In-memory user repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from roster.domain.model.user import User
from roster.domain.repository.user import UserRepository
from roster.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Mirrors the database's unique email constraint by raising IntegrityError.
    """

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    def _email_taken(self, email: str, exclude: UserId | None = None) -> bool:
        return any(
            user.email == email and user.id != exclude for user in self._users.values()
        )

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_all(self) -> list[User]:
        """Find all users in insertion order."""
        return list(self._users.values())

    async def add(self, user: User) -> User:
        """Insert a user.

        Raises:
            IntegrityError: If the ID or email already exists
        """
        if user.id in self._users or self._email_taken(user.email):
            raise IntegrityError("Duplicate user", None, Exception())
        self._users[user.id] = user
        return user

    async def update(self, user: User) -> Optional[User]:
        """Overwrite an existing user, returning None if it is not stored.

        Raises:
            IntegrityError: If another user has the same email
        """
        if self._email_taken(user.email, exclude=user.id):
            raise IntegrityError("Duplicate email", None, Exception())
        if user.id not in self._users:
            return None
        self._users[user.id] = user
        return user

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user by ID."""
        return self._users.pop(user_id, None) is not None
