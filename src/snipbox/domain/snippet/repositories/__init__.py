from snipbox.domain.snippet.repositories.snippet_repository import (
    DEFAULT_LATEST_LIMIT,
    SnippetRepository,
)

__all__ = ["DEFAULT_LATEST_LIMIT", "SnippetRepository"]
