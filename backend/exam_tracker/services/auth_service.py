"""Authentication Gate — credential checks and the session lifecycle.

Invariants:
    - authenticate() raises the same AuthenticationError for unknown user and wrong password
    - A session stores only the principal id; the full principal is reloaded per request
    - current_principal() raises UnauthenticatedError for a missing, expired or dangling
      session; a dangling session (user gone) is destroyed on the way out
    - end_session() is idempotent

Session states: Unauthenticated -> Authenticated (authenticate + establish_session)
-> Unauthenticated (end_session or expiry).
"""

import logging

from exam_tracker.core.domain_types import Principal, SessionToken
from exam_tracker.core.errors import AuthenticationError, UnauthenticatedError
from exam_tracker.core.repository_protocols import SessionStore, UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Verifies credentials and maps session tokens to principals."""

    def __init__(self, users: UserRepository, sessions: SessionStore):
        self.users = users
        self.sessions = sessions

    async def authenticate(self, username: str, password: str) -> Principal:
        principal = await self.users.get_user(username, password)
        if principal is None:
            logger.warning("Login failed")
            raise AuthenticationError()
        return principal

    def establish_session(self, principal: Principal) -> SessionToken:
        token = self.sessions.create(principal.id)
        logger.info("Session established", extra={"user_id": principal.id})
        return token

    async def current_principal(
        self,
        token: SessionToken | None,
        message: str = "not authenticated",
    ) -> Principal:
        if not token:
            raise UnauthenticatedError(message)
        user_id = self.sessions.get(token)
        if user_id is None:
            raise UnauthenticatedError(message)
        principal = await self.users.get_user_by_id(user_id)
        if principal is None:
            self.sessions.destroy(token)
            logger.warning("Session refers to a missing user", extra={"user_id": user_id})
            raise UnauthenticatedError(message)
        return principal

    def end_session(self, token: SessionToken | None) -> None:
        if token:
            self.sessions.destroy(token)
        logger.info("Session ended")
