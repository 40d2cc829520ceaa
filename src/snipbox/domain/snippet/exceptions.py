"""Snippet domain exceptions."""

from snipbox.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ValidationFailedError,
)


class SnippetNotFoundError(EntityNotFoundError):
    """Snippet does not exist or has expired.

    Both cases look the same to callers.
    """

    def __init__(self, snippet_id: str) -> None:
        self.snippet_id = snippet_id
        super().__init__(
            "Snippet not found",
            code=ErrorCode.SNIPPET_NOT_FOUND,
            details={"snippet_id": snippet_id},
        )


def allowed_expiry_message(allowed: tuple[int, ...]) -> str:
    *head, last = allowed
    if not head:
        return f"This field must equal {last}"
    return f"This field must equal {', '.join(str(d) for d in head)} or {last}"


class InvalidExpiryError(ValidationFailedError):
    """Expiry period is not one of the permitted values."""

    def __init__(self, days: int, allowed: tuple[int, ...]) -> None:
        self.days = days
        super().__init__(
            field_errors={"expires": [allowed_expiry_message(allowed)]},
            message=f"Invalid expiry period: {days} days",
            code=ErrorCode.INVALID_EXPIRY,
        )
