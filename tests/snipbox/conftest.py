"""
Pytest configuration for snipbox tests.

Provides the controllable clock, in-memory stores and database fixtures
shared by snippet, session and workflow tests.
"""

import pytest

from snipbox.application.session import Session, SessionManager
from snipbox.infrastructure.persistence.memory import (
    InMemorySessionStore,
    InMemorySnippetRepository,
)
from snipbox_identity.infrastructure.persistence.memory import InMemoryUserRepository
from snipbox_identity.services import PasswordHashingService

# Re-export shared fixtures
from tests.shared.fixtures import (  # noqa: F401
    FakeClock,
    async_engine,
    db_session,
    postgres_container,
    postgres_url,
    sqlite_engine,
    sqlite_session,
    sqlite_session_maker,
)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def password_service() -> PasswordHashingService:
    """Low work factor keeps tests fast."""
    return PasswordHashingService(rounds=4)


@pytest.fixture
def session_store(clock) -> InMemorySessionStore:
    return InMemorySessionStore(clock=clock)


@pytest.fixture
def session_manager(session_store, clock) -> SessionManager:
    return SessionManager(session_store, clock=clock)


@pytest.fixture
def http_session() -> Session:
    return Session()


@pytest.fixture
def snippet_repo(clock) -> InMemorySnippetRepository:
    return InMemorySnippetRepository(clock=clock)


@pytest.fixture
def user_repo(password_service) -> InMemoryUserRepository:
    return InMemoryUserRepository(password_service)
