"""SQLAlchemy models for persistence layer."""

from snipbox.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    CreatedAtMixin,
)
from snipbox.infrastructure.persistence.sqlalchemy.models.session_model import (
    SessionModel,
)
from snipbox.infrastructure.persistence.sqlalchemy.models.snippet_model import (
    SnippetModel,
)

__all__ = [
    "Base",
    "CreatedAtMixin",
    "SessionModel",
    "SnippetModel",
]
