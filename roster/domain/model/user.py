"""User aggregate root."""

from datetime import date, datetime
from typing import Optional

from pydantic import Field

from roster.domain.model.common import DomainModel, utcnow
from roster.domain.value import UserId


class User(DomainModel):
    """A user profile in the directory.

    ``id`` and ``created_at`` are assigned once at creation and never change.
    ``email`` is unique across live users; the store enforces it.
    """

    id: UserId
    name: str = Field(min_length=1)
    email: str
    phone: str
    date_of_birth: date
    profile_image: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
