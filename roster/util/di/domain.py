"""Domain layer DI providers."""

from dishka import Scope, provide

from roster.domain.repository import FollowRepository, UserRepository
from roster.domain.service import FollowService, ProfileService, UserService
from roster.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_user_service(
        self, user_repository: UserRepository, follow_repository: FollowRepository
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, follow_repository=follow_repository
        )

    @provide
    def get_follow_service(
        self, follow_repository: FollowRepository, user_repository: UserRepository
    ) -> FollowService:
        """Provide follow domain service."""
        return FollowService(
            follow_repository=follow_repository, user_repository=user_repository
        )

    @provide
    def get_profile_service(
        self, follow_repository: FollowRepository
    ) -> ProfileService:
        """Provide profile aggregation service."""
        return ProfileService(follow_repository=follow_repository)
