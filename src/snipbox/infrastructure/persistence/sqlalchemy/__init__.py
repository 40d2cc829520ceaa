"""SQLAlchemy persistence for snippets and sessions."""

from snipbox.infrastructure.persistence.sqlalchemy.guard import (
    is_unique_violation,
    run_guarded,
)
from snipbox.infrastructure.persistence.sqlalchemy.models import (
    Base,
    SessionModel,
    SnippetModel,
)
from snipbox.infrastructure.persistence.sqlalchemy.repositories import (
    SessionStoreSQLAlchemy,
    SnippetRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "SessionModel",
    "SessionStoreSQLAlchemy",
    "SnippetModel",
    "SnippetRepositorySQLAlchemy",
    "is_unique_violation",
    "run_guarded",
]
