"""Snippet repository interface."""

from abc import ABC, abstractmethod

from snipbox.domain.snippet.aggregates import Snippet

DEFAULT_LATEST_LIMIT = 5


class SnippetRepository(ABC):
    """Repository interface for Snippet aggregates.

    Implementations enforce visibility: expired snippets are never
    returned, whatever the caller asks for.
    """

    @abstractmethod
    async def insert(self, title: str, content: str, expires_in_days: int) -> str:
        """Persist a new snippet and return its identifier.

        Raises
        ------
        InvalidExpiryError
            If expires_in_days is not a permitted period
        RepositoryFailureError
            If the write did not affect exactly one row, or storage failed
        """

    @abstractmethod
    async def get(self, snippet_id: str) -> Snippet:
        """Return a live snippet.

        Raises
        ------
        SnippetNotFoundError
            If the snippet does not exist or has expired
        """

    @abstractmethod
    async def latest(self, limit: int = DEFAULT_LATEST_LIMIT) -> list[Snippet]:
        """Return up to ``limit`` live snippets, newest first."""
