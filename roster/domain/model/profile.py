"""Read-time profile composition."""

from datetime import date, datetime
from typing import Optional

from roster.domain.model.common import DomainModel
from roster.domain.value import UserId


class ProfileView(DomainModel):
    """A user record combined with derived age and follow-graph summary.

    Never persisted; rebuilt from the store on every read.
    """

    id: UserId
    name: str
    email: str
    phone: str
    date_of_birth: date
    profile_image: Optional[str]
    created_at: datetime
    age: int
    followers_count: int
    following_count: int
    followers: list[UserId]
    following: list[UserId]
