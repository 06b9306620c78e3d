"""Builders for domain objects used across tests."""

from datetime import date
from typing import Optional
from uuid import uuid4

from roster.domain.model import User
from roster.domain.value import UserId


def make_user(
    name: str = "Alice",
    email: Optional[str] = None,
    phone: str = "555-0100",
    date_of_birth: date = date(2000, 6, 15),
    profile_image: Optional[str] = None,
) -> User:
    """Helper function to build a User with a fresh ID.

    Args:
        name: Display name
        email: Email (a unique one is generated when omitted)
        phone: Phone number
        date_of_birth: Birth date
        profile_image: Optional image URL

    Returns:
        User domain model
    """
    return User(
        id=UserId(uuid4()),
        name=name,
        email=email or f"{uuid4().hex[:12]}@example.com",
        phone=phone,
        date_of_birth=date_of_birth,
        profile_image=profile_image,
    )
