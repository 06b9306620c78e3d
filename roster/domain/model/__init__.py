"""Domain model entities for roster."""

from roster.domain.model.follow import Follow, FollowSummary
from roster.domain.model.profile import ProfileView
from roster.domain.model.user import User

__all__ = [
    "User",
    "Follow",
    "FollowSummary",
    "ProfileView",
]
