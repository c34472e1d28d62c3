"""SQL User Store — credential verification and principal lookup.

Invariants:
    - get_user returns None for an unknown username AND for a wrong password
    - An unknown username still costs one hash verification (dummy_verify)
    - Returned principals never carry the password hash
    - A stored hash passlib cannot identify fails verification instead of raising

Design Decisions:
    - passlib CryptContext with pbkdf2_sha256 as default scheme; bcrypt hashes
      imported from older databases still verify
"""

import logging

from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from exam_tracker.core.domain_types import Principal, UserId
from exam_tracker.infrastructure.database import translate_db_errors
from exam_tracker.models.user import User

logger = logging.getLogger(__name__)

password_context = CryptContext(
    schemes=["pbkdf2_sha256", "bcrypt"], deprecated="auto",
)


def hash_password(password: str) -> str:
    return password_context.hash(password)


def check_password(password: str, expected_hash: str | None) -> bool:
    """Verify a password against a stored hash; None hash always fails in constant-ish time."""
    if not isinstance(password, str):
        password = ""
    if expected_hash is None:
        password_context.dummy_verify()
        return False
    try:
        return password_context.verify(password, expected_hash)
    except ValueError:
        logger.warning("Stored password hash is unrecognized")
        return False


def _to_principal(user: User) -> Principal:
    return Principal(id=UserId(user.id), username=user.username, name=user.name)


class SqlUserStore:
    """Looks up users by credential pair or by id."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_user(self, username: str, password: str) -> Principal | None:
        async with translate_db_errors(self.db, "get_user"):
            result = await self.db.execute(
                select(User).where(User.username == username),
            )
            user = result.scalar_one_or_none()
        if not check_password(password, user.password_hash if user else None):
            return None
        return _to_principal(user)

    async def get_user_by_id(self, user_id: UserId) -> Principal | None:
        async with translate_db_errors(self.db, "get_user_by_id"):
            user = await self.db.get(User, user_id)
        return _to_principal(user) if user else None
