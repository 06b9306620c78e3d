"""Unit tests for the in-memory repositories.

These stand in for PostgreSQL in unit tests, so they must honor the same
constraints the database enforces.
"""

import pytest
from sqlalchemy.exc import IntegrityError

from roster.domain.model import Follow
from roster.persistence.repository.inmemory import (
    InMemoryFollowRepository,
    InMemoryUserRepository,
)
from tests.factories import make_user


class TestInMemoryUserRepository:
    """Tests for InMemoryUserRepository."""

    @pytest.mark.asyncio
    async def test_add_and_find(self):
        repo = InMemoryUserRepository()
        user = make_user()

        await repo.add(user)

        assert await repo.find_by_id(user.id) == user
        assert await repo.find_all() == [user]

    @pytest.mark.asyncio
    async def test_add_duplicate_email_raises_integrity_error(self):
        repo = InMemoryUserRepository()
        await repo.add(make_user(email="a@x.com"))

        with pytest.raises(IntegrityError):
            await repo.add(make_user(email="a@x.com"))

    @pytest.mark.asyncio
    async def test_update_to_other_users_email_raises_integrity_error(self):
        repo = InMemoryUserRepository()
        await repo.add(make_user(email="a@x.com"))
        bob = await repo.add(make_user(email="b@x.com"))

        with pytest.raises(IntegrityError):
            await repo.update(bob.model_copy(update={"email": "a@x.com"}))

    @pytest.mark.asyncio
    async def test_update_of_missing_user_returns_none(self):
        repo = InMemoryUserRepository()

        assert await repo.update(make_user()) is None
        assert await repo.find_all() == []

    @pytest.mark.asyncio
    async def test_delete_reports_whether_row_existed(self):
        repo = InMemoryUserRepository()
        user = await repo.add(make_user())

        assert await repo.delete(user.id) is True
        assert await repo.delete(user.id) is False
        assert await repo.find_by_id(user.id) is None


class TestInMemoryFollowRepository:
    """Tests for InMemoryFollowRepository."""

    @pytest.mark.asyncio
    async def test_duplicate_edge_raises_integrity_error(self):
        repo = InMemoryFollowRepository()
        alice, bob = make_user(), make_user()
        await repo.add(Follow(follower_id=alice.id, following_id=bob.id))

        with pytest.raises(IntegrityError):
            await repo.add(Follow(follower_id=alice.id, following_id=bob.id))

    @pytest.mark.asyncio
    async def test_remove_all_for_user_removes_both_directions(self):
        # Arrange
        repo = InMemoryFollowRepository()
        alice, bob, carol = make_user(), make_user(), make_user()
        await repo.add(Follow(follower_id=alice.id, following_id=bob.id))
        await repo.add(Follow(follower_id=bob.id, following_id=alice.id))
        await repo.add(Follow(follower_id=bob.id, following_id=carol.id))

        # Act
        removed = await repo.remove_all_for_user(alice.id)

        # Assert
        assert removed == 2
        assert await repo.list_following_ids(bob.id) == [carol.id]
        assert await repo.count_followers(bob.id) == 0

    @pytest.mark.asyncio
    async def test_summarize_matches_lists(self):
        repo = InMemoryFollowRepository()
        alice, bob = make_user(), make_user()
        await repo.add(Follow(follower_id=alice.id, following_id=bob.id))

        summary = await repo.summarize(bob.id)

        assert summary.followers == [alice.id]
        assert summary.following == []
        assert summary.followers_count == await repo.count_followers(bob.id)
        assert summary.following_count == await repo.count_following(bob.id)

    def test_follow_rejects_self_edge(self):
        user = make_user()

        with pytest.raises(ValueError):
            Follow(follower_id=user.id, following_id=user.id)
