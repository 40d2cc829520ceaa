from snipbox.infrastructure.persistence.sqlalchemy.repositories.session_store import (
    SessionStoreSQLAlchemy,
)
from snipbox.infrastructure.persistence.sqlalchemy.repositories.snippet_repository import (
    SnippetRepositorySQLAlchemy,
)

__all__ = ["SessionStoreSQLAlchemy", "SnippetRepositorySQLAlchemy"]
