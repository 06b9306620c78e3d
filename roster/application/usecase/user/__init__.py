"""User use cases."""

from .create_user import CreateUserRequest, CreateUserUseCase, UserResponse
from .delete_user import DeleteUserRequest, DeleteUserResponse, DeleteUserUseCase
from .get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UserProfileResponse,
)
from .list_users import ListUsersUseCase
from .update_user import UpdateUserRequest, UpdateUserUseCase

__all__ = [
    "CreateUserRequest",
    "CreateUserUseCase",
    "DeleteUserRequest",
    "DeleteUserResponse",
    "DeleteUserUseCase",
    "GetUserProfileRequest",
    "GetUserProfileUseCase",
    "ListUsersUseCase",
    "UpdateUserRequest",
    "UpdateUserUseCase",
    "UserProfileResponse",
    "UserResponse",
]
