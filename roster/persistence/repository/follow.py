"""PostgreSQL implementation of Follow repository."""

from sqlalchemy import and_, delete, func, insert, or_, select

from roster.domain.model import Follow, FollowSummary
from roster.domain.repository import FollowRepository
from roster.domain.value import UserId
from roster.persistence.mappers import follow_to_dict
from roster.persistence.repository.base import PostgresRepository
from roster.persistence.tables import follows_table


class PostgresFollowRepository(PostgresRepository, FollowRepository):
    """PostgreSQL implementation of FollowRepository."""

    async def exists(self, follower_id: UserId, following_id: UserId) -> bool:
        """Check whether follower_id follows following_id."""
        stmt = select(follows_table.c.follower_id).where(
            and_(
                follows_table.c.follower_id == follower_id,
                follows_table.c.following_id == following_id,
            )
        )
        result = await self._execute(stmt, "checking follow")
        return result.first() is not None

    async def add(self, follow: Follow) -> Follow:
        """Insert a follow edge (primary key rejects duplicates)."""
        stmt = insert(follows_table).values(**follow_to_dict(follow))
        await self._execute(stmt, "following user", savepoint=True)
        return follow

    async def remove(self, follower_id: UserId, following_id: UserId) -> bool:
        """Remove a follow edge."""
        stmt = delete(follows_table).where(
            and_(
                follows_table.c.follower_id == follower_id,
                follows_table.c.following_id == following_id,
            )
        )
        result = await self._execute(stmt, "unfollowing user")
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def remove_all_for_user(self, user_id: UserId) -> int:
        """Remove every edge touching the user.

        Runs in a savepoint: it is a cleanup step after the user row is gone,
        and its failure must not undo that delete.
        """
        stmt = delete(follows_table).where(
            or_(
                follows_table.c.follower_id == user_id,
                follows_table.c.following_id == user_id,
            )
        )
        result = await self._execute(
            stmt, "cleaning up follow relationships", savepoint=True
        )
        return result.rowcount  # type: ignore[attr-defined]

    async def count_followers(self, user_id: UserId) -> int:
        """Count edges pointing at the user."""
        stmt = (
            select(func.count())
            .select_from(follows_table)
            .where(follows_table.c.following_id == user_id)
        )
        result = await self._execute(stmt, "counting followers")
        return result.scalar_one()

    async def count_following(self, user_id: UserId) -> int:
        """Count edges leaving the user."""
        stmt = (
            select(func.count())
            .select_from(follows_table)
            .where(follows_table.c.follower_id == user_id)
        )
        result = await self._execute(stmt, "counting following")
        return result.scalar_one()

    async def list_follower_ids(self, user_id: UserId) -> list[UserId]:
        """IDs of users following the user."""
        stmt = (
            select(follows_table.c.follower_id)
            .where(follows_table.c.following_id == user_id)
            .order_by(follows_table.c.created_at)
        )
        result = await self._execute(stmt, "listing followers")
        return [UserId(row) for row in result.scalars().all()]

    async def list_following_ids(self, user_id: UserId) -> list[UserId]:
        """IDs of users the user follows."""
        stmt = (
            select(follows_table.c.following_id)
            .where(follows_table.c.follower_id == user_id)
            .order_by(follows_table.c.created_at)
        )
        result = await self._execute(stmt, "listing following")
        return [UserId(row) for row in result.scalars().all()]

    async def summarize(self, user_id: UserId) -> FollowSummary:
        """Fetch both sides of the user's follow graph in one query."""
        stmt = (
            select(follows_table.c.follower_id, follows_table.c.following_id)
            .where(
                or_(
                    follows_table.c.follower_id == user_id,
                    follows_table.c.following_id == user_id,
                )
            )
            .order_by(follows_table.c.created_at)
        )
        result = await self._execute(stmt, "summarizing follows")

        followers: list[UserId] = []
        following: list[UserId] = []
        for row in result.all():
            if row.following_id == user_id:
                followers.append(UserId(row.follower_id))
            else:
                following.append(UserId(row.following_id))

        return FollowSummary(followers=followers, following=following)
