"""Table sessions: signed session ids and a TTL-bounded store of game state."""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any
from uuid import uuid4

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

from config import config

logger = logging.getLogger(__name__)


class SessionSigner:
    """Sign and verify session ids using itsdangerous."""

    def __init__(self, secret_key: str | None = None) -> None:
        self._serializer = URLSafeTimedSerializer(secret_key or config.security.secret_key)

    def sign(self, session_id: str) -> str:
        return self._serializer.dumps(session_id)

    def unsign(self, token: str, max_age: int | None = None) -> str | None:
        """
        Recover the session id from a signed token.

        Returns None if the token was tampered with, or is older than
        max_age seconds when one is given. Session liveness itself is the
        store's TTL, refreshed on every save.
        """
        try:
            return self._serializer.loads(token, max_age=max_age)
        except (BadSignature, SignatureExpired):
            return None


_session_signer: SessionSigner | None = None


def get_session_signer() -> SessionSigner:
    """Get or create the session signer."""
    global _session_signer
    if _session_signer is None:
        _session_signer = SessionSigner()
    return _session_signer


@dataclass
class TableSession:
    """One player's seat at the table: the saved game plus activity times."""

    game: dict[str, Any] | None = None
    created_at: float = field(default_factory=time.time)
    last_activity: float = field(default_factory=time.time)
    expires_at: float = 0.0

    def touch(self, ttl: int) -> None:
        """Mark the session active now and push its expiry ttl seconds out."""
        self.last_activity = time.time()
        self.expires_at = self.last_activity + ttl

    @property
    def is_expired(self) -> bool:
        return self.expires_at < time.time()


class SessionStore(ABC):
    """Where table sessions live between requests."""

    @abstractmethod
    async def get(self, session_id: str) -> TableSession | None:
        """Return the live session, or None if missing or expired."""

    @abstractmethod
    async def put(self, session_id: str, session: TableSession, ttl: int | None = None) -> None:
        """Store a session and refresh its expiry."""

    @abstractmethod
    async def delete(self, session_id: str) -> None:
        """Forget a session. Unknown ids are ignored."""

    async def exists(self, session_id: str) -> bool:
        return await self.get(session_id) is not None

    def new_session_id(self, signed: bool = True) -> str:
        """A fresh UUID, signed unless asked otherwise."""
        session_id = str(uuid4())
        return get_session_signer().sign(session_id) if signed else session_id


class InMemorySessionStore(SessionStore):
    """Process-local store; nothing survives a restart."""

    def __init__(self) -> None:
        self._sessions: dict[str, TableSession] = {}

    async def get(self, session_id: str) -> TableSession | None:
        session = self._sessions.get(session_id)
        if session is None:
            return None
        if session.is_expired:
            await self.delete(session_id)
            return None
        return session

    async def put(self, session_id: str, session: TableSession, ttl: int | None = None) -> None:
        session.touch(ttl or config.session_ttl)
        self._sessions[session_id] = session

    async def delete(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)

    async def purge_expired(self) -> int:
        """Drop every expired session and return how many went."""
        expired = [sid for sid, session in self._sessions.items() if session.is_expired]
        for sid in expired:
            del self._sessions[sid]
        if expired:
            logger.debug("Dropped %d expired sessions", len(expired))
        return len(expired)

    def __len__(self) -> int:
        return len(self._sessions)


_session_store: SessionStore | None = None


async def get_session_store() -> SessionStore:
    """Get or create the session store."""
    global _session_store
    if _session_store is None:
        _session_store = InMemorySessionStore()
    return _session_store


async def create_session() -> str:
    """Open an empty session and return its signed id."""
    store = await get_session_store()
    session_id = store.new_session_id()
    await store.put(session_id, TableSession())
    logger.info("Created session %s", session_id[:8])
    return session_id


async def load_game_state(session_id: str) -> dict[str, Any] | None:
    """The serialized game saved for a session, if any."""
    store = await get_session_store()
    session = await store.get(session_id)
    return session.game if session is not None else None


async def save_game_state(session_id: str, game: dict[str, Any]) -> None:
    """Save a serialized game, opening the session if it does not exist yet."""
    store = await get_session_store()
    session = await store.get(session_id) or TableSession()
    session.game = game
    await store.put(session_id, session)


async def delete_session(session_id: str) -> None:
    store = await get_session_store()
    await store.delete(session_id)


def extract_session_id(token: str) -> str | None:
    """The raw session id inside a signed token, or None if invalid."""
    return get_session_signer().unsign(token)
