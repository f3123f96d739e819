"""Server-side session store keyed by an opaque session id."""

import logging
import secrets
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from threading import Lock

from app.core.config import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionData:
    """Authenticated context for one client: who they are and their role."""

    session_id: str
    user_id: int
    role: str
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at


class SessionStore:
    """
    In-memory map of session id -> SessionData with a fixed time-to-live.

    Expiry is counted from creation and is not extended by later requests.
    Expired entries are dropped when looked up, whenever a new session is
    created, or by purge_expired().
    """

    def __init__(
        self,
        ttl_seconds: int,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._ttl = timedelta(seconds=ttl_seconds)
        self._clock = clock or (lambda: datetime.now(UTC))
        self._sessions: dict[str, SessionData] = {}
        self._lock = Lock()

    @property
    def ttl_seconds(self) -> int:
        return int(self._ttl.total_seconds())

    def create(self, user_id: int, role: str) -> SessionData:
        """Start a new session for user_id and return it."""
        now = self._clock()
        data = SessionData(
            session_id=secrets.token_urlsafe(32),
            user_id=user_id,
            role=role,
            created_at=now,
            expires_at=now + self._ttl,
        )
        with self._lock:
            self._drop_expired_head(now)
            self._sessions[data.session_id] = data
        return data

    def _drop_expired_head(self, now: datetime) -> None:
        # Insertion order is creation order and the TTL is fixed, so expired
        # entries are always at the front of the map. Caller holds the lock.
        expired = []
        for sid, data in self._sessions.items():
            if not data.is_expired(now):
                break
            expired.append(sid)
        for sid in expired:
            del self._sessions[sid]

    def get(self, session_id: str) -> SessionData | None:
        """Return the live session for session_id, or None if unknown or expired."""
        with self._lock:
            data = self._sessions.get(session_id)
            if data is None:
                return None
            if data.is_expired(self._clock()):
                del self._sessions[session_id]
                return None
            return data

    def destroy(self, session_id: str) -> bool:
        """Remove a session. Returns True if it existed."""
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def purge_expired(self) -> int:
        """Drop all expired sessions; returns how many were removed."""
        now = self._clock()
        with self._lock:
            expired = [sid for sid, data in self._sessions.items() if data.is_expired(now)]
            for sid in expired:
                del self._sessions[sid]
        if expired:
            logger.info("Session purge: removed=%s", len(expired))
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


_store = SessionStore(ttl_seconds=settings.SESSION_MAX_AGE_SECONDS)


def get_session_store() -> SessionStore:
    """Dependency returning the process-wide session store (override in tests)."""
    return _store
