"""Follow domain service."""

import logfire
from sqlalchemy.exc import IntegrityError

from roster.domain.error import AlreadyFollowingError, NotFoundError, SelfFollowError
from roster.domain.model import Follow
from roster.domain.repository import FollowRepository, UserRepository
from roster.domain.value import UserId

from .base import Service


class FollowService(Service):
    """Domain service for follow/unfollow operations."""

    def __init__(
        self,
        follow_repository: FollowRepository,
        user_repository: UserRepository,
    ) -> None:
        """Initialize follow service.

        Args:
            follow_repository: Follow repository
            user_repository: User repository (existence checks)
        """
        self.follow_repository = follow_repository
        self.user_repository = user_repository

    async def follow(self, follower_id: UserId, target_id: UserId) -> Follow:
        """Make ``follower_id`` follow ``target_id``.

        Args:
            follower_id: The user who follows
            target_id: The user being followed

        Returns:
            Created follow edge

        Raises:
            SelfFollowError: If both IDs are the same
            NotFoundError: If either user does not exist
            AlreadyFollowingError: If the edge already exists
        """
        with logfire.span(
            "follow_service.follow",
            follower_id=str(follower_id),
            target_id=str(target_id),
        ):
            if follower_id == target_id:
                logfire.warn("Self follow attempt", user_id=str(follower_id))
                raise SelfFollowError(str(follower_id))

            if not await self.user_repository.find_by_id(follower_id):
                logfire.warn("Follower not found", user_id=str(follower_id))
                raise NotFoundError("User", str(follower_id))
            if not await self.user_repository.find_by_id(target_id):
                logfire.warn("Follow target not found", user_id=str(target_id))
                raise NotFoundError("Target user", str(target_id))

            if await self.follow_repository.exists(follower_id, target_id):
                logfire.warn(
                    "Duplicate follow attempt",
                    follower_id=str(follower_id),
                    target_id=str(target_id),
                )
                raise AlreadyFollowingError(str(follower_id), str(target_id))

            follow = Follow(follower_id=follower_id, following_id=target_id)

            # Races surface as constraint violations: a concurrent identical
            # follow trips the primary key, a concurrent delete a foreign key
            try:
                saved = await self.follow_repository.add(follow)
            except IntegrityError:
                await self._raise_for_rejected_edge(follower_id, target_id)
                raise

            logfire.info(
                "User followed",
                follower_id=str(follower_id),
                target_id=str(target_id),
            )
            return saved

    async def _raise_for_rejected_edge(
        self, follower_id: UserId, target_id: UserId
    ) -> None:
        """Translate a rejected insert into the matching domain error.

        Raises:
            AlreadyFollowingError: If the edge now exists
            NotFoundError: If either user is gone
        """
        if await self.follow_repository.exists(follower_id, target_id):
            logfire.warn(
                "Duplicate follow attempt",
                follower_id=str(follower_id),
                target_id=str(target_id),
            )
            raise AlreadyFollowingError(str(follower_id), str(target_id))
        if not await self.user_repository.find_by_id(follower_id):
            logfire.warn("Follower deleted during follow", user_id=str(follower_id))
            raise NotFoundError("User", str(follower_id))
        if not await self.user_repository.find_by_id(target_id):
            logfire.warn("Follow target deleted during follow", user_id=str(target_id))
            raise NotFoundError("Target user", str(target_id))

    async def unfollow(self, follower_id: UserId, target_id: UserId) -> bool:
        """Remove the edge if present.

        Idempotent: neither the edge nor the users need to exist.

        Returns:
            True if an edge was removed, False if there was nothing to remove
        """
        with logfire.span(
            "follow_service.unfollow",
            follower_id=str(follower_id),
            target_id=str(target_id),
        ):
            removed = await self.follow_repository.remove(follower_id, target_id)
            logfire.info(
                "Unfollow processed",
                follower_id=str(follower_id),
                target_id=str(target_id),
                removed=removed,
            )
            return removed

    async def count_followers(self, user_id: UserId) -> int:
        """Number of users following the user."""
        return await self.follow_repository.count_followers(user_id)

    async def count_following(self, user_id: UserId) -> int:
        """Number of users the user follows."""
        return await self.follow_repository.count_following(user_id)

    async def list_follower_ids(self, user_id: UserId) -> list[UserId]:
        """IDs of users following the user."""
        return await self.follow_repository.list_follower_ids(user_id)

    async def list_following_ids(self, user_id: UserId) -> list[UserId]:
        """IDs of users the user follows."""
        return await self.follow_repository.list_following_ids(user_id)
