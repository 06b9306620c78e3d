"""Follow user use case."""

from pydantic import BaseModel

from roster.domain.error import NotFoundError, SelfFollowError
from roster.domain.service import FollowService
from roster.domain.value import parse_user_id


class FollowUserRequest(BaseModel):
    """Follow user request."""

    user_id: str  # The user who follows
    target_id: str  # The user being followed


class FollowUserResponse(BaseModel):
    """Follow user response."""

    message: str = "Successfully followed user"


class FollowUserUseCase:
    """Use case for making one user follow another."""

    def __init__(self, follow_service: FollowService) -> None:
        """Initialize follow user use case.

        Args:
            follow_service: Follow domain service
        """
        self.follow_service = follow_service

    async def execute(self, request: FollowUserRequest) -> FollowUserResponse:
        """Execute follow flow.

        Args:
            request: Follower and target IDs

        Returns:
            Confirmation message

        Raises:
            SelfFollowError: If both IDs are the same
            NotFoundError: If either user does not exist
            AlreadyFollowingError: If the edge already exists
        """
        # Self-follow is rejected before anything else, even for unknown IDs
        if request.user_id == request.target_id:
            raise SelfFollowError(request.user_id)

        follower_id = parse_user_id(request.user_id)
        if follower_id is None:
            raise NotFoundError("User", request.user_id)
        target_id = parse_user_id(request.target_id)
        if target_id is None:
            raise NotFoundError("Target user", request.target_id)

        await self.follow_service.follow(follower_id, target_id)
        return FollowUserResponse()
