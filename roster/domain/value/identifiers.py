"""Strongly typed identifiers for roster domain entities.

Using NewType for strong typing prevents mixing up user IDs with other
UUIDs and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)


def parse_user_id(raw: str) -> UserId | None:
    """Parse a user ID from its string form.

    Args:
        raw: Candidate UUID string (usually a path parameter)

    Returns:
        UserId if the string is a valid UUID, None otherwise
    """
    try:
        return UserId(UUID(raw))
    except ValueError:
        return None
