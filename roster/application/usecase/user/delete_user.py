"""Delete user use case."""

from pydantic import BaseModel

from roster.domain.error import NotFoundError
from roster.domain.service import UserService
from roster.domain.value import parse_user_id


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    user_id: str


class DeleteUserResponse(BaseModel):
    """Delete user response."""

    message: str = "User deleted successfully"


class DeleteUserUseCase:
    """Use case for deleting a user and their follow edges."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize delete user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: DeleteUserRequest) -> DeleteUserResponse:
        """Execute delete user flow.

        Raises:
            NotFoundError: If user not found
        """
        user_id = parse_user_id(request.user_id)
        if user_id is None:
            raise NotFoundError("User", request.user_id)

        await self.user_service.delete_user(user_id)
        return DeleteUserResponse()
