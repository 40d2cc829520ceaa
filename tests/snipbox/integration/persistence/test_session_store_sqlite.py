"""Tests for SessionStoreSQLAlchemy against a temporary SQLite file."""

from datetime import timedelta

import pytest

from snipbox.application.session import (
    AUTHENTICATED_USER_ID_KEY,
    FLASH_KEY,
    SessionManager,
)
from snipbox.infrastructure.persistence.sqlalchemy import SessionStoreSQLAlchemy


@pytest.fixture
def store(sqlite_session_maker, clock) -> SessionStoreSQLAlchemy:
    return SessionStoreSQLAlchemy(sqlite_session_maker, clock=clock, timeout=5.0)


class TestSessionStoreSQLite:
    @pytest.mark.asyncio
    async def test_insert_then_find(self, store, clock):
        expiry = clock() + timedelta(hours=12)

        await store.insert("tok", {"flash": "hello", "n": 1}, expiry)
        stored = await store.find("tok")

        assert stored.data == {"flash": "hello", "n": 1}
        assert stored.expiry == expiry

    @pytest.mark.asyncio
    async def test_update_overwrites_live_session(self, store, clock):
        expiry = clock() + timedelta(hours=12)
        await store.insert("tok", {"a": 1}, expiry)

        assert await store.update("tok", {"b": 2}, expiry) is True

        stored = await store.find("tok")
        assert stored.data == {"b": 2}
        assert stored.expiry == expiry

    @pytest.mark.asyncio
    async def test_update_never_creates_a_row(self, store, clock):
        expiry = clock() + timedelta(hours=12)
        await store.insert("tok", {"a": 1}, expiry)
        await store.delete("tok")

        assert await store.update("tok", {"a": 1}, expiry) is False
        assert await store.update("never-stored", {}, expiry) is False
        assert await store.find("tok") is None

    @pytest.mark.asyncio
    async def test_update_skips_expired_session(self, store, clock):
        await store.insert("tok", {"a": 1}, clock() + timedelta(minutes=5))
        clock.advance(timedelta(minutes=5))

        assert await store.update("tok", {"a": 2}, clock() + timedelta(hours=1)) is False
        assert await store.find("tok") is None

    @pytest.mark.asyncio
    async def test_unknown_token(self, store):
        assert await store.find("missing") is None

    @pytest.mark.asyncio
    async def test_delete(self, store, clock):
        await store.insert("tok", {}, clock() + timedelta(hours=1))

        await store.delete("tok")
        await store.delete("tok")

        assert await store.find("tok") is None

    @pytest.mark.asyncio
    async def test_expired_session_not_found(self, store, clock):
        await store.insert("tok", {"a": 1}, clock() + timedelta(hours=1))

        clock.advance(timedelta(hours=1))

        assert await store.find("tok") is None

    @pytest.mark.asyncio
    async def test_delete_expired_counts_rows(self, store, clock):
        await store.insert("old", {}, clock() + timedelta(minutes=1))
        await store.insert("older", {}, clock() + timedelta(seconds=1))
        await store.insert("fresh", {}, clock() + timedelta(hours=1))
        clock.advance(timedelta(minutes=5))

        removed = await store.delete_expired()

        assert removed == 2
        assert await store.delete_expired() == 0
        clock.advance(-timedelta(minutes=5))
        assert await store.find("fresh") is not None
        assert await store.find("old") is None

    @pytest.mark.asyncio
    async def test_renewed_token_stops_resolving(self, store, clock):
        """SessionManager over the SQL store: renew kills the old token."""
        manager = SessionManager(store, clock=clock)
        session = await manager.load(None)
        session.put("flash", "hi")
        old_token, _ = await manager.commit(session)

        await manager.renew_token(session)
        new_token, _ = await manager.commit(session)

        assert (await manager.load(old_token)).token is None
        reloaded = await manager.load(new_token)
        assert reloaded.get("flash") == "hi"

    @pytest.mark.asyncio
    async def test_stale_request_cannot_revive_renewed_token(self, store, clock):
        """A request still holding the old token must not write it back after logout."""
        manager = SessionManager(store, clock=clock)
        seeded = await manager.load(None)
        seeded.put(AUTHENTICATED_USER_ID_KEY, "user-1")
        seeded.put(FLASH_KEY, "Welcome back!")
        old_token, _ = await manager.commit(seeded)

        logging_out = await manager.load(old_token)
        reading_flash = await manager.load(old_token)

        await manager.renew_token(logging_out)
        logging_out.remove(AUTHENTICATED_USER_ID_KEY)
        new_token, _ = await manager.commit(logging_out)

        assert reading_flash.pop(FLASH_KEY) == "Welcome back!"
        assert await manager.commit(reading_flash) is None

        assert await store.find(old_token) is None
        assert (await manager.load(old_token)).get(AUTHENTICATED_USER_ID_KEY) is None
        assert (await manager.load(new_token)).get(AUTHENTICATED_USER_ID_KEY) is None
