"""User domain exceptions."""

from snipbox.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ValidationFailedError,
)


class InvalidEmailError(ValidationFailedError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(field_errors={"email": [message]}, message=message)


class EmailAlreadyExistsError(Exception):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Email already registered: {email}")


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(
            "User not found",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": user_id},
        )
