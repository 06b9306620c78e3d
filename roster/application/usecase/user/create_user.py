"""Create user use case."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from roster.domain.model import User
from roster.domain.service import UserService


class CreateUserRequest(BaseModel):
    """Create user request."""

    name: str = Field(min_length=1)
    email: str
    phone: str
    date_of_birth: date
    profile_image: Optional[str] = None


class UserResponse(BaseModel):
    """Stored user record without derived fields."""

    id: str
    name: str
    email: str
    phone: str
    date_of_birth: date
    profile_image: Optional[str]
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        """Convert domain User to response model."""
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            phone=user.phone,
            date_of_birth=user.date_of_birth,
            profile_image=user.profile_image,
            created_at=user.created_at,
        )


class CreateUserUseCase:
    """Use case for creating a user profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize create user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: CreateUserRequest) -> UserResponse:
        """Execute create user flow.

        Args:
            request: New user fields

        Returns:
            Created user

        Raises:
            DuplicateEmailError: If the email is already taken
        """
        user = await self.user_service.create_user(
            name=request.name,
            email=request.email,
            phone=request.phone,
            date_of_birth=request.date_of_birth,
            profile_image=request.profile_image,
        )
        return UserResponse.from_domain(user)
