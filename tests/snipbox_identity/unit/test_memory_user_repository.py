"""Tests for InMemoryUserRepository."""

from uuid import uuid4

import pytest

from snipbox_identity.domain.user import EmailAlreadyExistsError, UserNotFoundError
from snipbox_identity.exceptions import InvalidCredentialsError, WeakPasswordError
from snipbox_identity.infrastructure.persistence.memory import InMemoryUserRepository

TEST_NAME = "Alice"
TEST_EMAIL = "alice@example.com"
TEST_PASSWORD = "correct-horse-battery"


@pytest.fixture
def repo(password_service) -> InMemoryUserRepository:
    return InMemoryUserRepository(password_service)


class TestInMemoryUserRepository:
    @pytest.mark.asyncio
    async def test_insert_then_authenticate(self, repo):
        user = await repo.insert(TEST_NAME, TEST_EMAIL, TEST_PASSWORD)

        assert await repo.authenticate(TEST_EMAIL.upper(), TEST_PASSWORD) == user.id
        assert await repo.exists(user.id)

    @pytest.mark.asyncio
    async def test_duplicate_email_after_normalization(self, repo):
        await repo.insert(TEST_NAME, TEST_EMAIL, TEST_PASSWORD)

        with pytest.raises(EmailAlreadyExistsError):
            await repo.insert("Bob", " ALICE@example.com", "other-password")
        assert len(repo) == 1

    @pytest.mark.asyncio
    async def test_weak_password_stores_nothing(self, repo):
        with pytest.raises(WeakPasswordError):
            await repo.insert(TEST_NAME, TEST_EMAIL, "x" * 80)
        assert len(repo) == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email", ["nobody@example.com", "not an email"])
    async def test_unknown_or_invalid_email(self, repo, email):
        await repo.insert(TEST_NAME, TEST_EMAIL, TEST_PASSWORD)

        with pytest.raises(InvalidCredentialsError):
            await repo.authenticate(email, TEST_PASSWORD)

    @pytest.mark.asyncio
    async def test_get_unknown_user(self, repo):
        with pytest.raises(UserNotFoundError):
            await repo.get(uuid4())

    @pytest.mark.asyncio
    async def test_update_password(self, repo):
        user = await repo.insert(TEST_NAME, TEST_EMAIL, TEST_PASSWORD)

        with pytest.raises(InvalidCredentialsError):
            await repo.update_password(user.id, "wrong", "new-password-1")
        await repo.update_password(user.id, TEST_PASSWORD, "new-password-1")

        assert await repo.authenticate(TEST_EMAIL, "new-password-1") == user.id
