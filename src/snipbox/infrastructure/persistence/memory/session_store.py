"""In-memory implementation of the SessionStore port."""

from datetime import datetime
from typing import Any

from snipbox.application.ports import StoredSession
from snipbox.domain.shared.time import Clock, utc_now


class InMemorySessionStore:
    """Dictionary-backed session storage.

    Values are copied on the way in and out, matching the isolation a
    database-backed store gives.
    """

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock
        self._sessions: dict[str, StoredSession] = {}

    async def find(self, token: str) -> StoredSession | None:
        stored = self._sessions.get(token)
        if stored is None:
            return None
        if stored.expiry <= self._clock():
            del self._sessions[token]
            return None
        return StoredSession(data=dict(stored.data), expiry=stored.expiry)

    async def insert(
        self,
        token: str,
        data: dict[str, Any],
        expiry: datetime,
    ) -> None:
        self._sessions[token] = StoredSession(data=dict(data), expiry=expiry)

    async def update(
        self,
        token: str,
        data: dict[str, Any],
        expiry: datetime,
    ) -> bool:
        if await self.find(token) is None:
            return False
        self._sessions[token] = StoredSession(data=dict(data), expiry=expiry)
        return True

    async def delete(self, token: str) -> None:
        self._sessions.pop(token, None)

    def __contains__(self, token: object) -> bool:
        return token in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
