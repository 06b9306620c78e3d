"""In-memory repository implementations for testing."""

from .follow import InMemoryFollowRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryFollowRepository",
    "InMemoryUserRepository",
]
