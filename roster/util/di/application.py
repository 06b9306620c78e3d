"""Application layer DI providers."""

from dishka import Scope, provide

from roster.application.usecase.follow import FollowUserUseCase, UnfollowUserUseCase
from roster.application.usecase.user import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserProfileUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from roster.domain.service import FollowService, ProfileService, UserService
from roster.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_create_user_use_case(self, user_service: UserService) -> CreateUserUseCase:
        """Provide create user use case."""
        return CreateUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_get_user_profile_use_case(
        self, user_service: UserService, profile_service: ProfileService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(
            user_service=user_service, profile_service=profile_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_users_use_case(
        self, user_service: UserService, profile_service: ProfileService
    ) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(
            user_service=user_service, profile_service=profile_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_user_use_case(
        self, user_service: UserService, profile_service: ProfileService
    ) -> UpdateUserUseCase:
        """Provide update user use case."""
        return UpdateUserUseCase(
            user_service=user_service, profile_service=profile_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_user_use_case(self, user_service: UserService) -> DeleteUserUseCase:
        """Provide delete user use case."""
        return DeleteUserUseCase(user_service=user_service)

    # Follow use cases
    @provide(scope=Scope.REQUEST)
    def get_follow_user_use_case(
        self, follow_service: FollowService
    ) -> FollowUserUseCase:
        """Provide follow user use case."""
        return FollowUserUseCase(follow_service=follow_service)

    @provide(scope=Scope.REQUEST)
    def get_unfollow_user_use_case(
        self, follow_service: FollowService
    ) -> UnfollowUserUseCase:
        """Provide unfollow user use case."""
        return UnfollowUserUseCase(follow_service=follow_service)
