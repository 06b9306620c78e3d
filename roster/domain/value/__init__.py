"""Domain value objects for roster."""

from roster.domain.value.identifiers import UserId, parse_user_id
from roster.domain.value.types import UserChanges

__all__ = [
    # Identifiers
    "UserId",
    "parse_user_id",
    # Types
    "UserChanges",
]
