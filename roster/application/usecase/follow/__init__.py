"""Follow use cases."""

from .follow_user import FollowUserRequest, FollowUserResponse, FollowUserUseCase
from .unfollow_user import (
    UnfollowUserRequest,
    UnfollowUserResponse,
    UnfollowUserUseCase,
)

__all__ = [
    "FollowUserRequest",
    "FollowUserResponse",
    "FollowUserUseCase",
    "UnfollowUserRequest",
    "UnfollowUserResponse",
    "UnfollowUserUseCase",
]
