"""In-process implementations of the storage contracts.

Used by tests and by local runs that do not need durability.
"""

from snipbox.infrastructure.persistence.memory.session_store import InMemorySessionStore
from snipbox.infrastructure.persistence.memory.snippet_repository import (
    InMemorySnippetRepository,
)

__all__ = ["InMemorySessionStore", "InMemorySnippetRepository"]
