"""In-Memory Session Store — opaque session tokens mapped to principal ids.

Invariants:
    - A session holds the principal id and an expiry instant, nothing else
    - Tokens are unguessable (secrets.token_urlsafe, 256 bits)
    - An expired session is indistinguishable from a missing one and is purged on lookup
    - Every create() first drops all expired sessions, so abandoned tokens do not accumulate
    - destroy() is idempotent

Design Decisions:
    - Process-local dict: single-process uvicorn, sessions lost on restart
    - Injected clock (monotonic by default) so expiry is testable without sleeping
"""

import logging
import secrets
import time
from dataclasses import dataclass
from typing import Callable

from exam_tracker.core.domain_types import SessionToken, UserId

logger = logging.getLogger(__name__)


@dataclass
class _SessionEntry:
    user_id: UserId
    expires_at: float


class InMemorySessionStore:
    """Server-side session storage keyed by cookie token."""

    def __init__(
        self,
        ttl_seconds: int = 24 * 60 * 60,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._sessions: dict[SessionToken, _SessionEntry] = {}

    def create(self, user_id: UserId) -> SessionToken:
        now = self._clock()
        self._purge_expired(now)
        token = SessionToken(secrets.token_urlsafe(32))
        self._sessions[token] = _SessionEntry(
            user_id=user_id, expires_at=now + self._ttl_seconds,
        )
        return token

    def get(self, token: SessionToken) -> UserId | None:
        entry = self._sessions.get(token)
        if entry is None:
            return None
        if entry.expires_at <= self._clock():
            del self._sessions[token]
            logger.info("Session expired", extra={"user_id": entry.user_id})
            return None
        return entry.user_id

    def destroy(self, token: SessionToken) -> None:
        self._sessions.pop(token, None)

    def _purge_expired(self, now: float) -> None:
        self._sessions = {
            token: entry for token, entry in self._sessions.items()
            if entry.expires_at > now
        }

    def clear(self) -> None:
        """Drop every session (application shutdown)."""
        self._sessions.clear()

    def __len__(self) -> int:
        return len(self._sessions)
