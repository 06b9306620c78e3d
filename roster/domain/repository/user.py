"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from roster.domain.model.user import User
from roster.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[User]:
        """Find all users in insertion order.

        Returns:
            Every stored user
        """
        pass

    @abstractmethod
    async def add(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: The user to insert

        Returns:
            The inserted user

        Raises:
            IntegrityError: If the email is already taken
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> Optional[User]:
        """Overwrite the stored fields of an existing user.

        Args:
            user: The user with updated fields

        Returns:
            The updated user, or None if no such user is stored

        Raises:
            IntegrityError: If the new email is already taken
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> bool:
        """Delete a user.

        Args:
            user_id: The user's unique identifier

        Returns:
            True if a user was deleted, False if none existed
        """
        pass
