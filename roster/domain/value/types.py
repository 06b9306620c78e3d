"""Domain value objects for roster.

Value objects are immutable and defined by their values, not identity.
"""

from datetime import date
from typing import Any, Optional

from pydantic import model_validator

from roster.domain.value.common import ValueObject

# Fields that every stored user must carry; they may be omitted from an
# update but never cleared.
REQUIRED_USER_FIELDS = ("name", "email", "phone", "date_of_birth")


class UserChanges(ValueObject):
    """Partial update to a user profile.

    Only fields that were explicitly provided are applied. Presence is read
    from ``model_fields_set``, so an omitted field and a field set to ``None``
    are different things: ``profile_image=None`` clears the image, while an
    omitted ``profile_image`` leaves it untouched.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    date_of_birth: Optional[date] = None
    profile_image: Optional[str] = None

    @model_validator(mode="after")
    def reject_cleared_required_fields(self) -> "UserChanges":
        """Required fields may be changed but not set to null."""
        for field in REQUIRED_USER_FIELDS:
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        if "name" in self.model_fields_set and not self.name:
            raise ValueError("name cannot be empty")
        return self

    def as_update(self) -> dict[str, Any]:
        """Return only the explicitly provided fields."""
        return self.model_dump(exclude_unset=True)

    @property
    def is_empty(self) -> bool:
        """True when no field was provided."""
        return not self.model_fields_set
