"""Application-wide collaborators built once at startup.

The context lives on ``app.state.context`` and is handed to request
handlers through FastAPI dependencies. Nothing here is a module global.
"""

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from snipbox.application.ports import SessionStore
from snipbox.application.session import SessionManager
from snipbox.domain.shared.time import Clock, utc_now
from snipbox.infrastructure.persistence.sqlalchemy import SessionStoreSQLAlchemy
from snipbox_config.settings import Settings
from snipbox_identity.services import PasswordHashingService

logger = logging.getLogger(__name__)


def _is_in_memory_sqlite(url: str) -> bool:
    return url.startswith("sqlite") and (":memory:" in url or url.rstrip("/").endswith(":"))


def create_engine_for(url: str) -> AsyncEngine:
    """Create the shared async engine for ``url``.

    In-memory SQLite needs a single shared connection, otherwise every
    pooled connection would see its own empty database.
    """
    kwargs: dict[str, Any] = {"echo": False, "pool_pre_ping": True}

    if _is_in_memory_sqlite(url):
        kwargs["poolclass"] = StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}
    elif url.startswith("sqlite"):
        db_path = url.split("///", 1)[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return create_async_engine(url, **kwargs)


@dataclass
class AppContext:
    """Everything a request needs that outlives the request."""

    settings: Settings
    engine: AsyncEngine
    session_maker: async_sessionmaker[AsyncSession]
    session_manager: SessionManager
    password_service: PasswordHashingService
    clock: Clock = field(default=utc_now)

    @property
    def db_timeout(self) -> float | None:
        return self.settings.db_operation_timeout_seconds

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        clock: Clock = utc_now,
        session_store: SessionStore | None = None,
    ) -> "AppContext":
        """Build the context from settings.

        Parameters
        ----------
        settings
            Application settings
        clock
            Source of "now" for expiry decisions
        session_store
            Optional override; defaults to the database-backed store
        """
        engine = create_engine_for(settings.database_url)
        session_maker = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

        if session_store is None:
            session_store = SessionStoreSQLAlchemy(
                session_maker,
                clock=clock,
                timeout=settings.db_operation_timeout_seconds,
            )

        session_manager = SessionManager(
            session_store,
            lifetime=timedelta(hours=settings.session_lifetime_hours),
            clock=clock,
        )

        logger.debug("Application context created (database: %s)", settings.database_type)
        return cls(
            settings=settings,
            engine=engine,
            session_maker=session_maker,
            session_manager=session_manager,
            password_service=PasswordHashingService(rounds=settings.password_hash_rounds),
            clock=clock,
        )

    async def dispose(self) -> None:
        await self.engine.dispose()
