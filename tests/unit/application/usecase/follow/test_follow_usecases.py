"""Unit tests for follow use cases."""

from datetime import date
from uuid import uuid4

import pytest

from roster.application.usecase.follow import (
    FollowUserRequest,
    FollowUserUseCase,
    UnfollowUserRequest,
    UnfollowUserUseCase,
)
from roster.application.usecase.user import CreateUserRequest, CreateUserUseCase
from roster.domain.error import AlreadyFollowingError, NotFoundError, SelfFollowError
from roster.domain.service import FollowService
from roster.domain.value import parse_user_id
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def _create(unit_env, name: str) -> str:
    use_case = await unit_env.get(CreateUserUseCase)
    response = await use_case.execute(
        CreateUserRequest(
            name=name,
            email=f"{name.lower()}@x.com",
            phone="555-0100",
            date_of_birth=date(1990, 1, 1),
        )
    )
    return response.id


class TestFollowUserUseCase:
    """Tests for FollowUserUseCase."""

    @pytest.mark.asyncio
    async def test_follow_returns_message(self, unit_env):
        # Arrange
        follow = await unit_env.get(FollowUserUseCase)
        follow_service = await unit_env.get(FollowService)
        alice = await _create(unit_env, "Alice")
        bob = await _create(unit_env, "Bob")

        # Act
        response = await follow.execute(FollowUserRequest(user_id=alice, target_id=bob))

        # Assert
        assert response.message == "Successfully followed user"
        followers = await follow_service.list_follower_ids(parse_user_id(bob))
        assert [str(f) for f in followers] == [alice]

    @pytest.mark.asyncio
    async def test_same_raw_ids_raise_self_follow(self, unit_env):
        """Identical IDs are a self-follow even when malformed."""
        follow = await unit_env.get(FollowUserUseCase)

        with pytest.raises(SelfFollowError):
            await follow.execute(FollowUserRequest(user_id="x", target_id="x"))

    @pytest.mark.asyncio
    async def test_malformed_follower_raises_user_not_found(self, unit_env):
        follow = await unit_env.get(FollowUserUseCase)
        bob = await _create(unit_env, "Bob")

        with pytest.raises(NotFoundError) as exc_info:
            await follow.execute(FollowUserRequest(user_id="bad", target_id=bob))

        assert exc_info.value.detail == "User not found"

    @pytest.mark.asyncio
    async def test_malformed_target_raises_target_not_found(self, unit_env):
        follow = await unit_env.get(FollowUserUseCase)
        alice = await _create(unit_env, "Alice")

        with pytest.raises(NotFoundError) as exc_info:
            await follow.execute(FollowUserRequest(user_id=alice, target_id="bad"))

        assert exc_info.value.detail == "Target user not found"

    @pytest.mark.asyncio
    async def test_follow_twice_raises_already_following(self, unit_env):
        follow = await unit_env.get(FollowUserUseCase)
        alice = await _create(unit_env, "Alice")
        bob = await _create(unit_env, "Bob")
        await follow.execute(FollowUserRequest(user_id=alice, target_id=bob))

        with pytest.raises(AlreadyFollowingError):
            await follow.execute(FollowUserRequest(user_id=alice, target_id=bob))


class TestUnfollowUserUseCase:
    """Tests for UnfollowUserUseCase."""

    @pytest.mark.asyncio
    async def test_unfollow_removes_edge(self, unit_env):
        follow = await unit_env.get(FollowUserUseCase)
        unfollow = await unit_env.get(UnfollowUserUseCase)
        follow_service = await unit_env.get(FollowService)
        alice = await _create(unit_env, "Alice")
        bob = await _create(unit_env, "Bob")
        await follow.execute(FollowUserRequest(user_id=alice, target_id=bob))

        response = await unfollow.execute(
            UnfollowUserRequest(user_id=alice, target_id=bob)
        )

        assert response.message == "Successfully unfollowed user"
        assert await follow_service.count_followers(parse_user_id(bob)) == 0

    @pytest.mark.asyncio
    async def test_unfollow_is_noop_for_unknown_and_malformed_ids(self, unit_env):
        """Unfollow always succeeds."""
        unfollow = await unit_env.get(UnfollowUserUseCase)

        first = await unfollow.execute(
            UnfollowUserRequest(user_id=str(uuid4()), target_id=str(uuid4()))
        )
        second = await unfollow.execute(
            UnfollowUserRequest(user_id="bad", target_id="also-bad")
        )

        assert first.message == second.message == "Successfully unfollowed user"
