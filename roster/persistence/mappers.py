"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from roster.domain.model import Follow, User
from roster.domain.value import UserId


def _to_user_id(value: Any) -> UserId:
    return UserId(UUID(value) if isinstance(value, str) else value)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=_to_user_id(row["id"]),
        name=row["name"],
        email=row["email"],
        phone=row["phone"],
        date_of_birth=row["date_of_birth"],
        profile_image=row.get("profile_image"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return user.model_dump()


def row_to_follow(row: Dict[str, Any]) -> Follow:
    """Convert database row to Follow domain model."""
    return Follow(
        follower_id=_to_user_id(row["follower_id"]),
        following_id=_to_user_id(row["following_id"]),
        created_at=row["created_at"],
    )


def follow_to_dict(follow: Follow) -> Dict[str, Any]:
    """Convert Follow domain model to database dict."""
    return follow.model_dump()
