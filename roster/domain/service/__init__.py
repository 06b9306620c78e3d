"""Domain services."""

from .base import Service
from .follow_service import FollowService
from .profile_service import ProfileService, calculate_age
from .user_service import UserService

__all__ = [
    "FollowService",
    "ProfileService",
    "Service",
    "UserService",
    "calculate_age",
]
