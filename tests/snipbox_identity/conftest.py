"""
Pytest configuration for snipbox_identity tests.

Provides fixtures specific to users and credentials.
"""

import pytest

from snipbox_identity.domain.user import User
from snipbox_identity.services import PasswordHashingService

# Re-export shared fixtures
from tests.shared.fixtures import (  # noqa: F401
    async_engine,
    db_session,
    postgres_container,
    postgres_url,
    sqlite_engine,
    sqlite_session,
    sqlite_session_maker,
)

TEST_NAME = "Alice"
TEST_EMAIL = "alice@example.com"
TEST_PASSWORD = "correct-horse-battery"


@pytest.fixture
def password_service() -> PasswordHashingService:
    """Low work factor keeps tests fast."""
    return PasswordHashingService(rounds=4)


@pytest.fixture
def test_user() -> User:
    return User.create(TEST_NAME, TEST_EMAIL)
