"""In-memory follow repository for testing."""

from sqlalchemy.exc import IntegrityError

from roster.domain.model.follow import Follow, FollowSummary
from roster.domain.repository.follow import FollowRepository
from roster.domain.value import UserId


class InMemoryFollowRepository(FollowRepository):
    """In-memory implementation of FollowRepository for testing.

    Unlike the database there is no foreign-key cascade: edges of a deleted
    user stay until remove_all_for_user is called.
    """

    def __init__(self) -> None:
        self._follows: dict[tuple[UserId, UserId], Follow] = {}

    async def exists(self, follower_id: UserId, following_id: UserId) -> bool:
        """Check whether the edge exists."""
        return (follower_id, following_id) in self._follows

    async def add(self, follow: Follow) -> Follow:
        """Insert a follow edge.

        Raises:
            IntegrityError: If the edge already exists
        """
        key = (follow.follower_id, follow.following_id)
        if key in self._follows:
            raise IntegrityError("Duplicate follow", None, Exception())
        self._follows[key] = follow
        return follow

    async def remove(self, follower_id: UserId, following_id: UserId) -> bool:
        """Remove a follow edge."""
        return self._follows.pop((follower_id, following_id), None) is not None

    async def remove_all_for_user(self, user_id: UserId) -> int:
        """Remove every edge touching the user."""
        keys = [key for key in self._follows if user_id in key]
        for key in keys:
            del self._follows[key]
        return len(keys)

    async def count_followers(self, user_id: UserId) -> int:
        """Count edges pointing at the user."""
        return len(await self.list_follower_ids(user_id))

    async def count_following(self, user_id: UserId) -> int:
        """Count edges leaving the user."""
        return len(await self.list_following_ids(user_id))

    async def list_follower_ids(self, user_id: UserId) -> list[UserId]:
        """IDs of users following the user."""
        return [f.follower_id for f in self._follows.values() if f.following_id == user_id]

    async def list_following_ids(self, user_id: UserId) -> list[UserId]:
        """IDs of users the user follows."""
        return [f.following_id for f in self._follows.values() if f.follower_id == user_id]

    async def summarize(self, user_id: UserId) -> FollowSummary:
        """Both sides of the user's follow graph."""
        return FollowSummary(
            followers=await self.list_follower_ids(user_id),
            following=await self.list_following_ids(user_id),
        )
