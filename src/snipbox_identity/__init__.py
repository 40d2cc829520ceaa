"""Snipbox Identity - users, credentials and authentication.

This package handles identity concerns only:
- User aggregate and its repository contract
- Password hashing and verification (bcrypt)
- Authentication errors

Snippets and sessions live in the snipbox package, which references users
by id alone.
"""

from snipbox_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    User,
    UserNotFoundError,
    UserRepository,
)
from snipbox_identity.exceptions import (
    AuthError,
    InvalidCredentialsError,
    MalformedCredentialError,
    WeakPasswordError,
)
from snipbox_identity.services import PasswordHashingService

__all__ = [
    # Domain - User
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    # Exceptions
    "AuthError",
    "InvalidCredentialsError",
    "MalformedCredentialError",
    "WeakPasswordError",
    # Services
    "PasswordHashingService",
]
