"""Tests for session management."""

import time
from unittest.mock import patch

import pytest
import pytest_asyncio

import api.session as session_module
from api.session import (
    InMemorySessionStore,
    SessionSigner,
    TableSession,
    create_session,
    delete_session,
    extract_session_id,
    get_session_signer,
    get_session_store,
    load_game_state,
    save_game_state,
)


@pytest.fixture
def fresh_session_state():
    """Reset the module-level store and signer around a test."""
    session_module._session_store = None
    session_module._session_signer = None
    yield
    session_module._session_store = None
    session_module._session_signer = None


class TestSessionSigner:
    """Tests for SessionSigner class."""

    def test_sign_and_unsign(self):
        signer = SessionSigner(secret_key="test-secret")
        token = signer.sign("table-1")

        assert token != "table-1"
        assert signer.unsign(token, max_age=3600) == "table-1"

    def test_unsign_garbage_returns_none(self):
        signer = SessionSigner(secret_key="test-secret")
        assert signer.unsign("not-a-token", max_age=3600) is None

    def test_unsign_wrong_secret_returns_none(self):
        token = SessionSigner(secret_key="secret-one").sign("table-1")
        assert SessionSigner(secret_key="secret-two").unsign(token, max_age=3600) is None

    def test_unsign_expired_token_returns_none(self):
        """A token older than max_age is rejected."""
        signer = SessionSigner(secret_key="test-secret")
        token = signer.sign("table-1")

        later = time.time() + 7200
        with patch("time.time", return_value=later):
            assert signer.unsign(token, max_age=3600) is None

    def test_unsign_without_max_age_ignores_token_age(self):
        """Long-running sessions keep a valid id; the store TTL ends them."""
        signer = SessionSigner(secret_key="test-secret")
        token = signer.sign("table-1")

        later = time.time() + 7200
        with patch("time.time", return_value=later):
            assert signer.unsign(token) == "table-1"

    def test_distinct_ids_give_distinct_tokens(self):
        signer = SessionSigner(secret_key="test-secret")
        assert signer.sign("a") != signer.sign("b")


class TestTableSession:
    """Tests for TableSession expiry bookkeeping."""

    def test_touch_sets_expiry(self):
        session = TableSession()
        session.touch(60)
        assert session.expires_at == pytest.approx(session.last_activity + 60)
        assert not session.is_expired

    def test_untouched_session_is_expired(self):
        assert TableSession().is_expired


class TestInMemorySessionStore:
    """Tests for InMemorySessionStore class."""

    @pytest_asyncio.fixture
    async def store(self):
        return InMemorySessionStore()

    @pytest.mark.asyncio
    async def test_put_and_get(self, store):
        session = TableSession(game={"state": "player_turn"})
        await store.put("s1", session, ttl=3600)
        assert await store.get("s1") is session
        assert len(store) == 1

    @pytest.mark.asyncio
    async def test_get_missing(self, store):
        assert await store.get("missing") is None

    @pytest.mark.asyncio
    async def test_delete(self, store):
        await store.put("s1", TableSession(), ttl=3600)
        await store.delete("s1")
        await store.delete("never-existed")
        assert await store.get("s1") is None

    @pytest.mark.asyncio
    async def test_exists(self, store):
        assert await store.exists("s1") is False
        await store.put("s1", TableSession(), ttl=3600)
        assert await store.exists("s1") is True

    @pytest.mark.asyncio
    async def test_expired_session_is_dropped(self, store):
        await store.put("s1", TableSession(), ttl=1)
        time.sleep(1.5)
        assert await store.get("s1") is None
        assert len(store) == 0

    @pytest.mark.asyncio
    async def test_purge_expired(self, store):
        await store.put("short-1", TableSession(), ttl=1)
        await store.put("short-2", TableSession(), ttl=1)
        await store.put("long", TableSession(), ttl=3600)
        time.sleep(1.5)

        assert await store.purge_expired() == 2
        assert await store.exists("long") is True
        assert len(store) == 1

    @pytest.mark.asyncio
    async def test_put_refreshes_expiry(self, store):
        session = TableSession()
        await store.put("s1", session, ttl=1)
        first_expiry = session.expires_at
        await store.put("s1", session, ttl=3600)
        assert session.expires_at > first_expiry

    def test_new_session_id(self, store):
        signed = store.new_session_id(signed=True)
        unsigned = store.new_session_id(signed=False)

        assert len(signed) > 36
        assert len(unsigned) == 36
        assert unsigned.count("-") == 4


class TestModuleFunctions:
    """Tests for module-level session functions."""

    @pytest.mark.asyncio
    async def test_game_state_lifecycle(self, fresh_session_state):
        session_id = await create_session()
        assert len(session_id) > 36
        assert await load_game_state(session_id) is None

        await save_game_state(session_id, {"player_score": 3})
        assert await load_game_state(session_id) == {"player_score": 3}

        await delete_session(session_id)
        assert await load_game_state(session_id) is None

    @pytest.mark.asyncio
    async def test_save_opens_missing_session(self, fresh_session_state):
        await save_game_state("unseen", {"bot_score": 1})
        store = await get_session_store()
        session = await store.get("unseen")
        assert session.game == {"bot_score": 1}
        assert session.created_at <= session.last_activity

    @pytest.mark.asyncio
    async def test_created_session_id_round_trips_through_signer(self, fresh_session_state):
        session_id = await create_session()
        raw = extract_session_id(session_id)
        assert raw is not None
        assert len(raw) == 36

    def test_extract_session_id_with_patched_signer(self):
        signer = SessionSigner(secret_key="test-secret")
        token = signer.sign("table-9")
        with patch("api.session.get_session_signer", return_value=signer):
            assert extract_session_id(token) == "table-9"

    def test_extract_invalid_returns_none(self):
        assert extract_session_id("invalid-token") is None

    def test_signer_is_singleton(self, fresh_session_state):
        assert get_session_signer() is get_session_signer()
