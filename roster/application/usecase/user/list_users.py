"""List users use case."""

from roster.domain.service import ProfileService, UserService

from .get_user_profile import UserProfileResponse


class ListUsersUseCase:
    """Use case for listing every user with derived profile fields."""

    def __init__(
        self,
        user_service: UserService,
        profile_service: ProfileService,
    ) -> None:
        """Initialize list users use case.

        Args:
            user_service: User domain service
            profile_service: Profile aggregation service
        """
        self.user_service = user_service
        self.profile_service = profile_service

    async def execute(self) -> list[UserProfileResponse]:
        """Execute list users flow.

        Returns:
            Profile views in insertion order
        """
        users = await self.user_service.list_users()
        views = await self.profile_service.to_profile_views(users)
        return [UserProfileResponse.from_domain(view) for view in views]
