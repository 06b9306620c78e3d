"""Unfollow user use case."""

from pydantic import BaseModel

from roster.domain.service import FollowService
from roster.domain.value import parse_user_id


class UnfollowUserRequest(BaseModel):
    """Unfollow user request."""

    user_id: str
    target_id: str


class UnfollowUserResponse(BaseModel):
    """Unfollow user response."""

    message: str = "Successfully unfollowed user"


class UnfollowUserUseCase:
    """Use case for removing a follow edge.

    Always succeeds: unknown users, malformed IDs and missing edges are
    all no-ops.
    """

    def __init__(self, follow_service: FollowService) -> None:
        """Initialize unfollow user use case.

        Args:
            follow_service: Follow domain service
        """
        self.follow_service = follow_service

    async def execute(self, request: UnfollowUserRequest) -> UnfollowUserResponse:
        """Execute unfollow flow."""
        follower_id = parse_user_id(request.user_id)
        target_id = parse_user_id(request.target_id)

        if follower_id is not None and target_id is not None:
            await self.follow_service.unfollow(follower_id, target_id)

        return UnfollowUserResponse()
