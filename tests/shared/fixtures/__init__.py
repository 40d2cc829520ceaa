"""Shared pytest fixtures for all test domains."""

from tests.shared.fixtures.clock import FIXED_NOW, FakeClock
from tests.shared.fixtures.database import (
    async_engine,
    db_session,
    postgres_container,
    postgres_url,
    sqlite_engine,
    sqlite_session,
    sqlite_session_maker,
)

__all__ = [
    "FIXED_NOW",
    "FakeClock",
    "async_engine",
    "db_session",
    "postgres_container",
    "postgres_url",
    "sqlite_engine",
    "sqlite_session",
    "sqlite_session_maker",
]
