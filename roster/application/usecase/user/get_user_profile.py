"""Get user profile use case."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel

from roster.domain.error import NotFoundError
from roster.domain.model import ProfileView
from roster.domain.service import ProfileService, UserService
from roster.domain.value import parse_user_id


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: str


class UserProfileResponse(BaseModel):
    """User profile with derived age and follow-graph summary."""

    id: str
    name: str
    email: str
    phone: str
    date_of_birth: date
    profile_image: Optional[str]
    created_at: datetime
    age: int
    followers_count: int
    following_count: int
    followers: list[str]
    following: list[str]

    @classmethod
    def from_domain(cls, view: ProfileView) -> "UserProfileResponse":
        """Convert domain ProfileView to response model.

        Args:
            view: Domain profile view

        Returns:
            API response model with IDs rendered as strings
        """
        return cls(
            id=str(view.id),
            name=view.name,
            email=view.email,
            phone=view.phone,
            date_of_birth=view.date_of_birth,
            profile_image=view.profile_image,
            created_at=view.created_at,
            age=view.age,
            followers_count=view.followers_count,
            following_count=view.following_count,
            followers=[str(user_id) for user_id in view.followers],
            following=[str(user_id) for user_id in view.following],
        )


class GetUserProfileUseCase:
    """Use case for getting a single user's profile view."""

    def __init__(
        self,
        user_service: UserService,
        profile_service: ProfileService,
    ) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
            profile_service: Profile aggregation service
        """
        self.user_service = user_service
        self.profile_service = profile_service

    async def execute(self, request: GetUserProfileRequest) -> UserProfileResponse:
        """Execute get user profile flow.

        Steps:
        1. Resolve the user (malformed IDs count as unknown)
        2. Compose the profile view from current store state

        Args:
            request: Request with user ID

        Returns:
            User profile

        Raises:
            NotFoundError: If the user does not exist
        """
        user_id = parse_user_id(request.user_id)
        if user_id is None:
            raise NotFoundError("User", request.user_id)

        user = await self.user_service.get_user(user_id)
        view = await self.profile_service.to_profile_view(user)
        return UserProfileResponse.from_domain(view)
