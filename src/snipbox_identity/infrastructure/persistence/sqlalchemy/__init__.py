"""SQLAlchemy implementation for snipbox_identity persistence.

Provides:
- IdentityBase: Declarative base for identity models
- UserModel: SQLAlchemy model for users and their password hashes
- UserRepositorySQLAlchemy: Repository implementation for users
"""

from snipbox_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase
from snipbox_identity.infrastructure.persistence.sqlalchemy.models import UserModel
from snipbox_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "IdentityBase",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
