"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")

    @property
    def detail(self) -> str:
        """Client-facing message."""
        return f"{self.resource} not found"


class DuplicateEmailError(DomainError):
    """Raised when an email is already taken by another user."""

    detail = "Email already exists"

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email already exists: {email}")


class SelfFollowError(DomainError):
    """Raised when a user tries to follow themselves."""

    detail = "Cannot follow yourself"

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User {user_id} cannot follow themselves")


class AlreadyFollowingError(DomainError):
    """Raised when the follow edge already exists."""

    detail = "Already following this user"

    def __init__(self, follower_id: str, following_id: str):
        self.follower_id = follower_id
        self.following_id = following_id
        super().__init__(f"User {follower_id} already follows {following_id}")


class StoreFailureError(DomainError):
    """Raised when the underlying store fails for reasons other than a constraint."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Store failure during {operation}")

    @property
    def detail(self) -> str:
        """Client-facing message."""
        return f"Error during {self.operation}"
