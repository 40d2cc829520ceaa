"""Server-side sessions keyed by an opaque, rotating token."""

from __future__ import annotations

import logging
import secrets
from datetime import datetime, timedelta
from enum import Enum
from typing import Any

from snipbox.application.ports import SessionStore
from snipbox.domain.shared.time import Clock, utc_now

logger = logging.getLogger(__name__)

AUTHENTICATED_USER_ID_KEY = "authenticated_user_id"
FLASH_KEY = "flash"
REDIRECT_KEY = "redirect"

DEFAULT_LIFETIME = timedelta(hours=12)


class SessionStatus(str, Enum):
    """Whether a session needs to be written back at the end of a request."""

    UNMODIFIED = "unmodified"
    MODIFIED = "modified"


class Session:
    """Named values for one browser session during one request.

    Values must be JSON-serializable. ``pop`` gives single-read semantics
    for flash messages and post-login redirect targets.
    """

    def __init__(
        self,
        token: str | None = None,
        data: dict[str, Any] | None = None,
        expiry: datetime | None = None,
    ):
        self._token = token
        self._data = dict(data or {})
        self._expiry = expiry
        self._status = SessionStatus.UNMODIFIED
        # Set while the token has been minted but not yet written to the store
        self._unsaved_token = False

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def expiry(self) -> datetime | None:
        return self._expiry

    @property
    def status(self) -> SessionStatus:
        return self._status

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def put(self, key: str, value: Any) -> None:
        self._data[key] = value
        self._status = SessionStatus.MODIFIED

    def pop(self, key: str, default: Any = None) -> Any:
        if key not in self._data:
            return default
        value = self._data.pop(key)
        self._status = SessionStatus.MODIFIED
        return value

    def remove(self, key: str) -> None:
        if key in self._data:
            del self._data[key]
            self._status = SessionStatus.MODIFIED

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def _rotate(self, token: str, expiry: datetime) -> None:
        self._token = token
        self._expiry = expiry
        self._unsaved_token = True
        self._status = SessionStatus.MODIFIED

    def __repr__(self) -> str:
        return f"Session(status={self._status.value}, keys={sorted(self._data)})"


class SessionManager:
    """Loads, renews and saves sessions through a SessionStore.

    Sessions have an absolute lifetime counted from the moment their token
    was minted; renewing the token starts a new lifetime.
    """

    TOKEN_BYTES = 32

    def __init__(
        self,
        store: SessionStore,
        lifetime: timedelta = DEFAULT_LIFETIME,
        clock: Clock = utc_now,
    ):
        self._store = store
        self._lifetime = lifetime
        self._clock = clock

    @property
    def lifetime(self) -> timedelta:
        return self._lifetime

    async def load(self, token: str | None) -> Session:
        """Load the session for ``token``; unknown or expired tokens get a new one."""
        if not token:
            return Session()

        stored = await self._store.find(token)
        if stored is None:
            return Session()

        return Session(token=token, data=stored.data, expiry=stored.expiry)

    async def renew_token(self, session: Session) -> None:
        """Replace the session token, keeping its values.

        The old token is deleted from the store before this returns, so
        concurrent requests carrying it resolve to an empty session.
        """
        old_token = session.token
        if old_token is not None:
            await self._store.delete(old_token)

        session._rotate(self._new_token(), self._clock() + self._lifetime)
        logger.debug("Session token renewed")

    async def commit(self, session: Session) -> tuple[str, datetime] | None:
        """Write the session to the store.

        A token minted during this request is inserted. A loaded token is
        only updated in place: if another request renewed it away in the
        meantime, the write is dropped so the old token stays dead.

        Returns
        -------
        tuple[str, datetime] | None
            The token and expiry to send to the client, or ``None`` when
            the write was dropped
        """
        if session.token is None or session.expiry is None:
            session._rotate(self._new_token(), self._clock() + self._lifetime)

        token, expiry = session.token, session.expiry
        if session._unsaved_token:
            await self._store.insert(token, session.to_dict(), expiry)
            session._unsaved_token = False
        elif not await self._store.update(token, session.to_dict(), expiry):
            logger.info("Session token was revoked during the request; write dropped")
            return None

        return token, expiry

    def _new_token(self) -> str:
        return secrets.token_urlsafe(self.TOKEN_BYTES)
