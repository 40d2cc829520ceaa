"""Unit tests for Session and SessionManager."""

from datetime import timedelta

import pytest

from snipbox.application.session import (
    AUTHENTICATED_USER_ID_KEY,
    FLASH_KEY,
    Session,
    SessionManager,
    SessionStatus,
)


class TestSession:
    def test_new_session_is_unmodified(self):
        session = Session()

        assert session.token is None
        assert session.status is SessionStatus.UNMODIFIED

    def test_get_does_not_modify(self):
        session = Session(token="t", data={"a": 1})

        assert session.get("a") == 1
        assert session.get("missing", "default") == "default"
        assert session.status is SessionStatus.UNMODIFIED

    def test_pop_reads_once(self):
        session = Session(token="t", data={FLASH_KEY: "Saved!"})

        assert session.pop(FLASH_KEY) == "Saved!"
        assert session.pop(FLASH_KEY) is None
        assert session.status is SessionStatus.MODIFIED

    def test_pop_of_absent_key_leaves_session_unmodified(self):
        session = Session(token="t")

        assert session.pop(FLASH_KEY) is None
        assert session.status is SessionStatus.UNMODIFIED

    def test_remove(self):
        session = Session(token="t", data={"a": 1})

        session.remove("a")
        session.remove("never-there")

        assert "a" not in session
        assert session.status is SessionStatus.MODIFIED


class TestSessionManager:
    @pytest.mark.asyncio
    async def test_load_without_token_gives_empty_session(self, session_manager):
        session = await session_manager.load(None)

        assert session.token is None
        assert session.to_dict() == {}

    @pytest.mark.asyncio
    async def test_commit_then_load_round_trips_values(self, session_manager, clock):
        session = await session_manager.load(None)
        session.put("answer", 42)

        token, expiry = await session_manager.commit(session)
        loaded = await session_manager.load(token)

        assert expiry == clock() + timedelta(hours=12)
        assert loaded.token == token
        assert loaded.get("answer") == 42

    @pytest.mark.asyncio
    async def test_unknown_token_gives_fresh_session(self, session_manager):
        session = await session_manager.load("forged-token")

        assert session.token is None
        assert session.to_dict() == {}

    @pytest.mark.asyncio
    async def test_session_stops_resolving_after_lifetime(self, session_manager, clock):
        session = await session_manager.load(None)
        session.put("a", 1)
        token, _ = await session_manager.commit(session)

        clock.advance(timedelta(hours=12))

        assert (await session_manager.load(token)).to_dict() == {}

    @pytest.mark.asyncio
    async def test_renew_token_keeps_values_and_kills_old_token(
        self,
        session_manager,
        session_store,
    ):
        session = await session_manager.load(None)
        session.put(AUTHENTICATED_USER_ID_KEY, "user-1")
        old_token, _ = await session_manager.commit(session)

        await session_manager.renew_token(session)

        # The old token is gone before the new one is even committed
        assert old_token not in session_store
        assert session.token != old_token
        assert session.get(AUTHENTICATED_USER_ID_KEY) == "user-1"
        assert session.status is SessionStatus.MODIFIED

        new_token, _ = await session_manager.commit(session)
        assert (await session_manager.load(old_token)).to_dict() == {}
        assert (await session_manager.load(new_token)).get(AUTHENTICATED_USER_ID_KEY) == "user-1"

    @pytest.mark.asyncio
    async def test_renew_token_restarts_lifetime(self, session_manager, clock):
        session = await session_manager.load(None)
        await session_manager.commit(session)
        first_expiry = session.expiry

        clock.advance(timedelta(hours=1))
        await session_manager.renew_token(session)

        assert session.expiry == first_expiry + timedelta(hours=1)

    @pytest.mark.asyncio
    async def test_concurrent_request_cannot_revive_renewed_token(
        self,
        session_manager,
        session_store,
    ):
        seeded = await session_manager.load(None)
        seeded.put(AUTHENTICATED_USER_ID_KEY, "user-1")
        seeded.put(FLASH_KEY, "Snippet successfully created!")
        old_token, _ = await session_manager.commit(seeded)

        logging_out = await session_manager.load(old_token)
        reading_flash = await session_manager.load(old_token)

        await session_manager.renew_token(logging_out)
        logging_out.remove(AUTHENTICATED_USER_ID_KEY)
        await session_manager.commit(logging_out)

        reading_flash.pop(FLASH_KEY)
        saved = await session_manager.commit(reading_flash)

        assert saved is None
        assert old_token not in session_store
        assert (await session_manager.load(old_token)).get(AUTHENTICATED_USER_ID_KEY) is None

    @pytest.mark.asyncio
    async def test_loaded_session_is_updated_in_place(self, session_manager, session_store):
        session = await session_manager.load(None)
        session.put("a", 1)
        token, expiry = await session_manager.commit(session)

        loaded = await session_manager.load(token)
        loaded.put("a", 2)

        assert await session_manager.commit(loaded) == (token, expiry)
        assert len(session_store) == 1
        assert (await session_manager.load(token)).get("a") == 2

    @pytest.mark.asyncio
    async def test_session_expiring_mid_request_is_not_written(self, session_manager, clock):
        session = await session_manager.load(None)
        session.put("a", 1)
        token, _ = await session_manager.commit(session)

        loaded = await session_manager.load(token)
        loaded.put("a", 2)
        clock.advance(timedelta(hours=12))

        assert await session_manager.commit(loaded) is None
        clock.advance(-timedelta(hours=1))
        assert (await session_manager.load(token)).to_dict() == {}

    @pytest.mark.asyncio
    async def test_repeated_commits_of_new_session_keep_one_token(
        self,
        session_manager,
        session_store,
    ):
        session = await session_manager.load(None)
        first = await session_manager.commit(session)
        session.put("a", 1)

        assert await session_manager.commit(session) == first
        assert len(session_store) == 1

    @pytest.mark.asyncio
    async def test_tokens_are_long_and_unique(self, session_store):
        manager = SessionManager(session_store)
        tokens = set()
        for _ in range(50):
            session = Session()
            token, _ = await manager.commit(session)
            tokens.add(token)

        assert len(tokens) == 50
        assert all(len(t) >= 43 for t in tokens)
