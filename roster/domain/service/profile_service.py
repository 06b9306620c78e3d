"""Profile aggregation service.

Builds the externally visible ProfileView for users by combining the stored
record with derived fields. Nothing is cached: every call re-reads the
follow graph so the view always reflects the current store.
"""

from datetime import date
from typing import Callable, Iterable

import logfire

from roster.domain.model import ProfileView, User
from roster.domain.repository import FollowRepository

from .base import Service


def calculate_age(date_of_birth: date, today: date) -> int:
    """Whole years elapsed between a birth date and ``today``.

    The year difference is reduced by one while this year's birthday has not
    been reached. A 29 February birthday is reached on 1 March in non-leap
    years.

    Args:
        date_of_birth: Birth date
        today: Reference date

    Returns:
        Age in whole years
    """
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


class ProfileService(Service):
    """Domain service composing ProfileViews."""

    def __init__(
        self,
        follow_repository: FollowRepository,
        today: Callable[[], date] = date.today,
    ) -> None:
        """Initialize profile service.

        Args:
            follow_repository: Follow repository for the derived fields
            today: Clock returning the current date (injectable for tests)
        """
        self.follow_repository = follow_repository
        self.today = today

    async def to_profile_view(self, user: User) -> ProfileView:
        """Compose the profile view of a single user.

        Args:
            user: Stored user record

        Returns:
            User fields plus age and follower/following summary
        """
        summary = await self.follow_repository.summarize(user.id)

        return ProfileView(
            **user.model_dump(),
            age=calculate_age(user.date_of_birth, self.today()),
            followers_count=summary.followers_count,
            following_count=summary.following_count,
            followers=summary.followers,
            following=summary.following,
        )

    async def to_profile_views(self, users: Iterable[User]) -> list[ProfileView]:
        """Compose profile views for many users, preserving order.

        Each user is summarized independently; there is no single snapshot
        across the batch.
        """
        with logfire.span("profile_service.to_profile_views"):
            views = [await self.to_profile_view(user) for user in users]
            logfire.info("Profile views composed", count=len(views))
            return views
