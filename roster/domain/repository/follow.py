"""Follow repository interface."""

from abc import ABC, abstractmethod

from roster.domain.model.follow import Follow, FollowSummary
from roster.domain.value import UserId


class FollowRepository(ABC):
    """Repository for follow edges between users."""

    @abstractmethod
    async def exists(self, follower_id: UserId, following_id: UserId) -> bool:
        """Check whether the edge exists.

        Args:
            follower_id: The following user
            following_id: The followed user

        Returns:
            True if follower_id follows following_id
        """
        pass

    @abstractmethod
    async def add(self, follow: Follow) -> Follow:
        """Insert a follow edge.

        Args:
            follow: The edge to insert

        Returns:
            The inserted edge

        Raises:
            IntegrityError: If the edge already exists
        """
        pass

    @abstractmethod
    async def remove(self, follower_id: UserId, following_id: UserId) -> bool:
        """Remove a follow edge.

        Returns:
            True if an edge was removed, False if none existed
        """
        pass

    @abstractmethod
    async def remove_all_for_user(self, user_id: UserId) -> int:
        """Remove every edge where the user is either endpoint.

        Returns:
            Number of edges removed
        """
        pass

    @abstractmethod
    async def count_followers(self, user_id: UserId) -> int:
        """Count edges pointing at the user."""
        pass

    @abstractmethod
    async def count_following(self, user_id: UserId) -> int:
        """Count edges leaving the user."""
        pass

    @abstractmethod
    async def list_follower_ids(self, user_id: UserId) -> list[UserId]:
        """IDs of users following the user, oldest edge first."""
        pass

    @abstractmethod
    async def list_following_ids(self, user_id: UserId) -> list[UserId]:
        """IDs of users the user follows, oldest edge first."""
        pass

    @abstractmethod
    async def summarize(self, user_id: UserId) -> FollowSummary:
        """Fetch both follower and following IDs in a single round trip.

        Args:
            user_id: The user to summarize

        Returns:
            Summary with both ID lists (counts are their lengths)
        """
        pass
