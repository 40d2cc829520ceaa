"""SQLAlchemy implementation of the SessionStore port."""

import logging
from datetime import datetime
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from snipbox.application.ports import StoredSession
from snipbox.domain.shared.time import Clock, ensure_tz_aware, utc_now
from snipbox.infrastructure.persistence.sqlalchemy.guard import run_guarded
from snipbox.infrastructure.persistence.sqlalchemy.models import SessionModel

logger = logging.getLogger(__name__)


class SessionStoreSQLAlchemy:
    """Keeps sessions in the ``sessions`` table.

    Each call opens its own database session and commits before returning,
    so a deleted token stops resolving immediately, independent of the
    request's unit of work.
    """

    def __init__(
        self,
        session_maker: async_sessionmaker[AsyncSession],
        clock: Clock = utc_now,
        timeout: float | None = None,
    ) -> None:
        self._session_maker = session_maker
        self._clock = clock
        self._timeout = timeout

    async def find(self, token: str) -> StoredSession | None:
        async def _find() -> StoredSession | None:
            async with self._session_maker() as session:
                stmt = select(SessionModel).where(
                    SessionModel.token == token,
                    SessionModel.expiry > self._clock(),
                )
                result = await session.execute(stmt)
                model = result.scalar_one_or_none()
                if model is None:
                    return None
                return StoredSession(
                    data=dict(model.data or {}),
                    expiry=ensure_tz_aware(model.expiry),
                )

        return await run_guarded("sessions.find", _find(), self._timeout)

    async def insert(
        self,
        token: str,
        data: dict[str, Any],
        expiry: datetime,
    ) -> None:
        async def _insert() -> None:
            async with self._session_maker() as session:
                session.add(SessionModel(token=token, data=data, expiry=expiry))
                await session.commit()

        await run_guarded("sessions.insert", _insert(), self._timeout)

    async def update(
        self,
        token: str,
        data: dict[str, Any],
        expiry: datetime,
    ) -> bool:
        async def _update() -> bool:
            async with self._session_maker() as session:
                stmt = (
                    update(SessionModel)
                    .where(
                        SessionModel.token == token,
                        SessionModel.expiry > self._clock(),
                    )
                    .values(data=data, expiry=expiry)
                )
                result = await session.execute(stmt)
                await session.commit()
                return result.rowcount == 1

        return await run_guarded("sessions.update", _update(), self._timeout)

    async def delete(self, token: str) -> None:
        async def _delete() -> None:
            async with self._session_maker() as session:
                await session.execute(delete(SessionModel).where(SessionModel.token == token))
                await session.commit()

        await run_guarded("sessions.delete", _delete(), self._timeout)

    async def delete_expired(self) -> int:
        """Purge rows past their deadline and return how many were removed."""

        async def _purge() -> int:
            async with self._session_maker() as session:
                result = await session.execute(
                    delete(SessionModel).where(SessionModel.expiry <= self._clock())
                )
                await session.commit()
                return result.rowcount or 0

        removed = await run_guarded("sessions.delete_expired", _purge(), self._timeout)
        if removed:
            logger.info("Purged %d expired sessions", removed)
        return removed
