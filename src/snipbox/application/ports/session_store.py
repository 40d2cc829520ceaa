"""Session store port. Interface for server-side session persistence."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Protocol


@dataclass(frozen=True)
class StoredSession:
    """Session values as persisted, with their absolute deadline."""

    data: dict[str, Any]
    expiry: datetime


class SessionStore(Protocol):
    """Port for keyed session storage.

    Implementations must never return a session whose expiry has passed,
    and ``delete`` must take effect for every later ``find``.
    """

    async def find(self, token: str) -> StoredSession | None:
        """Return the live session stored under ``token``, if any."""
        ...

    async def insert(
        self,
        token: str,
        data: dict[str, Any],
        expiry: datetime,
    ) -> None:
        """Store a session under a newly minted ``token``."""
        ...

    async def update(
        self,
        token: str,
        data: dict[str, Any],
        expiry: datetime,
    ) -> bool:
        """Overwrite the live session stored under ``token``.

        Returns ``False``, writing nothing, when no live session exists.
        """
        ...

    async def delete(self, token: str) -> None:
        """Remove the session stored under ``token`` (no-op when absent)."""
        ...
