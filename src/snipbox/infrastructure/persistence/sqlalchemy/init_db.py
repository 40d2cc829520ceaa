"""Schema management for every snipbox table.

Importing the identity models here registers the ``users`` table on the
shared metadata before ``create_all`` runs.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from snipbox.infrastructure.persistence.sqlalchemy.models import Base
from snipbox_identity.infrastructure.persistence.sqlalchemy.models import (  # noqa: F401
    UserModel,
)

logger = logging.getLogger(__name__)


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")


async def drop_tables(engine: AsyncEngine) -> None:
    """
    Drop all database tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    logger.warning("Dropping all database tables...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    logger.info("Database tables dropped successfully")


async def reset_tables(engine: AsyncEngine) -> None:
    await drop_tables(engine)
    await create_tables(engine)


def table_names() -> list[str]:
    return sorted(Base.metadata.tables)
