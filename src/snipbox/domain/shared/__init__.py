"""Shared domain components.

This module exports shared exceptions and time helpers used across
domain boundaries.
"""

from snipbox.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    RepositoryFailureError,
    ValidationFailedError,
)
from snipbox.domain.shared.time import Clock, ensure_tz_aware, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "EntityNotFoundError",
    "RepositoryFailureError",
    "ValidationFailedError",
    # Utilities
    "Clock",
    "ensure_tz_aware",
    "utc_now",
]
