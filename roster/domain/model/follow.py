"""Follow relationship between two users."""

from datetime import datetime

from pydantic import Field, model_validator

from roster.domain.model.common import DomainModel, utcnow
from roster.domain.value import UserId


class Follow(DomainModel):
    """Directed edge meaning "follower_id follows following_id".

    Identified by the ordered pair; at most one edge exists per pair and it
    is never mutated, only created or removed.
    """

    follower_id: UserId
    following_id: UserId
    created_at: datetime = Field(default_factory=utcnow)

    @model_validator(mode="after")
    def no_self_edge(self) -> "Follow":
        """A user cannot follow themselves."""
        if self.follower_id == self.following_id:
            raise ValueError("follower_id and following_id must differ")
        return self


class FollowSummary(DomainModel):
    """Both sides of a user's follow graph, fetched together."""

    followers: list[UserId] = Field(default_factory=list)
    following: list[UserId] = Field(default_factory=list)

    @property
    def followers_count(self) -> int:
        return len(self.followers)

    @property
    def following_count(self) -> int:
        return len(self.following)
