"""Follow routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from roster.application.usecase.follow import (
    FollowUserRequest,
    FollowUserResponse,
    FollowUserUseCase,
    UnfollowUserRequest,
    UnfollowUserResponse,
    UnfollowUserUseCase,
)
from roster.domain.error import AlreadyFollowingError, NotFoundError, SelfFollowError

router = APIRouter(prefix="/users", tags=["follows"], route_class=DishkaRoute)


@router.post("/{user_id}/follow/{target_id}", response_model=FollowUserResponse)
async def follow_user(
    user_id: str,
    target_id: str,
    follow_user_use_case: FromDishka[FollowUserUseCase],
) -> FollowUserResponse:
    """Make ``user_id`` follow ``target_id``.

    Raises:
        HTTPException: 400 on self-follow or an existing follow, 404 if
            either user does not exist
    """
    try:
        return await follow_user_use_case.execute(
            FollowUserRequest(user_id=user_id, target_id=target_id)
        )
    except (SelfFollowError, AlreadyFollowingError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.detail,
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.detail,
        )


@router.post("/{user_id}/unfollow/{target_id}", response_model=UnfollowUserResponse)
async def unfollow_user(
    user_id: str,
    target_id: str,
    unfollow_user_use_case: FromDishka[UnfollowUserUseCase],
) -> UnfollowUserResponse:
    """Make ``user_id`` stop following ``target_id``.

    Succeeds even when there was no such follow.
    """
    return await unfollow_user_use_case.execute(
        UnfollowUserRequest(user_id=user_id, target_id=target_id)
    )
