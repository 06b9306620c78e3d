"""User routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from roster.application.usecase.user import (
    CreateUserRequest,
    CreateUserUseCase,
    DeleteUserRequest,
    DeleteUserResponse,
    DeleteUserUseCase,
    GetUserProfileRequest,
    GetUserProfileUseCase,
    ListUsersUseCase,
    UpdateUserRequest,
    UpdateUserUseCase,
    UserProfileResponse,
    UserResponse,
)
from roster.domain.error import DuplicateEmailError, NotFoundError
from roster.domain.value import UserChanges

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateUserAPIRequest(UserChanges):
    """API request for updating a user.

    All fields are optional; only the ones sent are applied. ``following``
    is accepted for compatibility with the edit form but ignored: follow
    edges change only through the follow/unfollow endpoints.
    """

    following: Optional[list[str]] = None

    def to_changes(self) -> UserChanges:
        """Strip API-only fields, keeping presence information."""
        return UserChanges(**self.model_dump(exclude_unset=True, exclude={"following"}))


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: CreateUserRequest,
    create_user_use_case: FromDishka[CreateUserUseCase],
) -> UserResponse:
    """Create a user.

    Example:
        POST /api/users

        Request:
        {
            "name": "Alice",
            "email": "a@x.com",
            "phone": "555-0100",
            "date_of_birth": "2000-06-15"
        }

    Raises:
        HTTPException: 400 if the email already exists
    """
    try:
        return await create_user_use_case.execute(request)
    except DuplicateEmailError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.detail,
        )


@router.get("", response_model=list[UserProfileResponse])
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
) -> list[UserProfileResponse]:
    """List every user with age and follow-graph summary."""
    return await list_users_use_case.execute()


@router.get("/{user_id}", response_model=UserProfileResponse)
async def get_user(
    user_id: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> UserProfileResponse:
    """Get a user's profile.

    Example:
        GET /api/users/123e4567-e89b-12d3-a456-426614174000

        Response:
        {
            "id": "123e4567-e89b-12d3-a456-426614174000",
            "name": "Alice",
            "email": "a@x.com",
            "phone": "555-0100",
            "date_of_birth": "2000-06-15",
            "profile_image": null,
            "created_at": "2025-01-15T12:34:56Z",
            "age": 24,
            "followers_count": 0,
            "following_count": 1,
            "followers": [],
            "following": ["c0ffee00-0000-4000-8000-000000000000"]
        }

    Raises:
        HTTPException: 404 if the user does not exist
    """
    try:
        return await get_user_profile_use_case.execute(
            GetUserProfileRequest(user_id=user_id)
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.detail,
        )


@router.put("/{user_id}", response_model=UserProfileResponse)
async def update_user(
    user_id: str,
    request: UpdateUserAPIRequest,
    update_user_use_case: FromDishka[UpdateUserUseCase],
) -> UserProfileResponse:
    """Partially update a user.

    Raises:
        HTTPException: 404 if the user does not exist, 400 if the new email
            is already taken
    """
    try:
        return await update_user_use_case.execute(
            UpdateUserRequest(user_id=user_id, changes=request.to_changes())
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.detail,
        )
    except DuplicateEmailError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.detail,
        )


@router.delete("/{user_id}", response_model=DeleteUserResponse)
async def delete_user(
    user_id: str,
    delete_user_use_case: FromDishka[DeleteUserUseCase],
) -> DeleteUserResponse:
    """Delete a user and every follow relationship involving them.

    Raises:
        HTTPException: 404 if the user does not exist
    """
    try:
        return await delete_user_use_case.execute(DeleteUserRequest(user_id=user_id))
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.detail,
        )
