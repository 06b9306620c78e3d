"""PostgreSQL repository implementations."""

from roster.persistence.repository.follow import PostgresFollowRepository
from roster.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresFollowRepository",
]
