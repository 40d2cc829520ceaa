"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy and error codes for the
domain layer. All domain exceptions inherit from DomainException so the
presentation layer can handle them in one place.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    # Request Errors (400)
    BAD_REQUEST = "BAD_REQUEST"

    # Validation Errors (422)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_EXPIRY = "INVALID_EXPIRY"

    # Not Found Errors (404)
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    SNIPPET_NOT_FOUND = "SNIPPET_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Storage Errors (500)
    STORAGE_FAILURE = "STORAGE_FAILURE"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationFailedError(DomainException):
    """Raised when one or more field rules are violated.

    Carries every violation, not just the first one, so the caller can
    report all problems at once.

    Attributes
    ----------
    field_errors
        Messages keyed by field name, in the order they were recorded
    non_field_errors
        Messages that do not belong to a single field
    values
        Submitted values safe to echo back (never passwords)
    """

    def __init__(
        self,
        field_errors: dict[str, list[str]] | None = None,
        non_field_errors: list[str] | None = None,
        message: str = "Submitted data is invalid",
        values: dict[str, Any] | None = None,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
    ) -> None:
        self.field_errors = {k: list(v) for k, v in (field_errors or {}).items()}
        self.non_field_errors = list(non_field_errors or [])
        self.values = dict(values or {})
        super().__init__(
            message,
            code,
            details={
                "fields": sorted(self.field_errors),
                "non_field_errors": len(self.non_field_errors),
            },
        )


class EntityNotFoundError(DomainException):
    """Raised when a requested entity cannot be found (or is not visible)."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.ENTITY_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class RepositoryFailureError(DomainException):
    """Raised for any storage problem that is not a known domain outcome.

    Connectivity errors, timeouts, unexpected row counts and corrupt stored
    data all end up here. The message is generic; the original error is
    chained as ``__cause__``.
    """

    def __init__(
        self,
        operation: str,
        reason: str = "failed",
        code: ErrorCode = ErrorCode.STORAGE_FAILURE,
    ) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(
            "A storage error occurred",
            code,
            details={"operation": operation, "reason": reason},
        )
