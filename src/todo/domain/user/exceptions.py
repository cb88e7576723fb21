"""User domain exceptions."""

from todo.domain.shared.exceptions import (
    DatabaseError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class UserNotFoundError(EntityNotFoundError):
    """No user matches the lookup."""

    def __init__(self, user_id: str | None = None) -> None:
        self.user_id = user_id
        message = f"User not found: {user_id}" if user_id else "User not found"
        super().__init__(message, ErrorCode.USER_NOT_FOUND)


class EmailAlreadyExistsError(DatabaseError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            f"Email already registered: {email}",
            ErrorCode.EMAIL_ALREADY_EXISTS,
        )


class InvalidCredentialsError(ValidationError):
    """Email or password is incorrect during login."""

    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(message, ErrorCode.INVALID_CREDENTIALS)
