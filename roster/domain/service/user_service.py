"""User domain service."""

from datetime import date
from typing import Optional
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from roster.domain.error import DuplicateEmailError, NotFoundError
from roster.domain.model import User
from roster.domain.repository import FollowRepository, UserRepository
from roster.domain.value import UserChanges, UserId

from .base import Service


class UserService(Service):
    """Domain service for user lifecycle operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        follow_repository: FollowRepository,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            follow_repository: Follow repository (used for delete cleanup)
        """
        self.user_repository = user_repository
        self.follow_repository = follow_repository

    async def create_user(
        self,
        name: str,
        email: str,
        phone: str,
        date_of_birth: date,
        profile_image: Optional[str] = None,
    ) -> User:
        """Create a new user with a fresh ID.

        The email uniqueness check is left to the store's constraint so two
        concurrent creates with the same email cannot both succeed.

        Args:
            name: Display name
            email: Email address (must be unique)
            phone: Phone number
            date_of_birth: Date of birth
            profile_image: Optional image URL

        Returns:
            Created user

        Raises:
            DuplicateEmailError: If the email is already taken
        """
        with logfire.span("user_service.create_user", email=email):
            user = User(
                id=UserId(uuid4()),
                name=name,
                email=email,
                phone=phone,
                date_of_birth=date_of_birth,
                profile_image=profile_image,
            )

            try:
                created = await self.user_repository.add(user)
            except IntegrityError:
                logfire.warn("Duplicate email on create", email=email)
                raise DuplicateEmailError(email)

            logfire.info("User created", user_id=str(created.id), email=email)
            return created

    async def get_user(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_user", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def list_users(self) -> list[User]:
        """List all users in insertion order."""
        with logfire.span("user_service.list_users"):
            users = await self.user_repository.find_all()
            logfire.info("Users listed", count=len(users))
            return users

    async def update_user(self, user_id: UserId, changes: UserChanges) -> User:
        """Apply a partial update to a user.

        Only fields present in ``changes`` are written; everything else keeps
        its stored value.

        Args:
            user_id: User ID
            changes: Fields to change

        Returns:
            Updated user

        Raises:
            NotFoundError: If user not found
            DuplicateEmailError: If the new email belongs to another user
        """
        with logfire.span(
            "user_service.update_user",
            user_id=str(user_id),
            fields=sorted(changes.model_fields_set),
        ):
            user = await self.get_user(user_id)
            if changes.is_empty:
                return user

            updated = user.model_copy(update=changes.as_update())

            try:
                saved = await self.user_repository.update(updated)
            except IntegrityError:
                logfire.warn(
                    "Duplicate email on update",
                    user_id=str(user_id),
                    email=updated.email,
                )
                raise DuplicateEmailError(updated.email)

            # Deleted between the read and the write
            if saved is None:
                logfire.warn("User vanished during update", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))

            logfire.info("User updated", user_id=str(user_id))
            return saved

    async def delete_user(self, user_id: UserId) -> None:
        """Delete a user and every follow edge touching them.

        Edge cleanup runs after the user row is gone and is best-effort: a
        failure there is logged, not raised.

        Args:
            user_id: User ID

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.delete_user", user_id=str(user_id)):
            deleted = await self.user_repository.delete(user_id)
            if not deleted:
                logfire.warn("Delete of unknown user", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))

            try:
                removed = await self.follow_repository.remove_all_for_user(user_id)
            except Exception as e:
                logfire.error(
                    "Error cleaning up follow relationships",
                    user_id=str(user_id),
                    error=str(e),
                    error_type=type(e).__name__,
                )
            else:
                logfire.info(
                    "Follow relationships cleaned up",
                    user_id=str(user_id),
                    removed=removed,
                )

            logfire.info("User deleted", user_id=str(user_id))
