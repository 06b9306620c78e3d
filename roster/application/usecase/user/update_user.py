"""Update user use case."""

from pydantic import BaseModel

from roster.domain.error import NotFoundError
from roster.domain.service import ProfileService, UserService
from roster.domain.value import UserChanges, parse_user_id

from .get_user_profile import UserProfileResponse


class UpdateUserRequest(BaseModel):
    """Update user request."""

    user_id: str
    changes: UserChanges


class UpdateUserUseCase:
    """Use case for partially updating a user profile.

    Follow edges are not touched here; they change only through the
    follow/unfollow use cases.
    """

    def __init__(
        self,
        user_service: UserService,
        profile_service: ProfileService,
    ) -> None:
        """Initialize update user use case.

        Args:
            user_service: User domain service
            profile_service: Profile aggregation service
        """
        self.user_service = user_service
        self.profile_service = profile_service

    async def execute(self, request: UpdateUserRequest) -> UserProfileResponse:
        """Execute update user flow.

        Steps:
        1. Resolve the user ID (malformed IDs count as unknown)
        2. Apply only the provided fields
        3. Return the refreshed profile view

        Args:
            request: Request with user ID and changes

        Returns:
            Updated user profile

        Raises:
            NotFoundError: If user not found
            DuplicateEmailError: If the new email is already taken
        """
        user_id = parse_user_id(request.user_id)
        if user_id is None:
            raise NotFoundError("User", request.user_id)

        user = await self.user_service.update_user(user_id, request.changes)
        view = await self.profile_service.to_profile_view(user)
        return UserProfileResponse.from_domain(view)
