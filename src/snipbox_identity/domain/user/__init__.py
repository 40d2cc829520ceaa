"""User domain manages user identity.

This domain handles:
- User aggregate (identity: id, name, email)
- Email normalization and validation
- Repository contract for users and their credentials
"""

from snipbox_identity.domain.user.aggregates import User
from snipbox_identity.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    UserNotFoundError,
)
from snipbox_identity.domain.user.repositories import UserRepository
from snipbox_identity.domain.user.value_objects import EMAIL_PATTERN, Email

__all__ = [
    "EMAIL_PATTERN",
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "User",
    "UserNotFoundError",
    "UserRepository",
]
