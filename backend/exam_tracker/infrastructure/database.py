"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)
    - One manager per application, held on app.state.db and disposed at shutdown

Design Decisions:
    - expire_on_commit=False: prevents lazy-load issues in async context
    - translate_db_errors is shared by the manager and the stores, so an error raised
      inside a route body is mapped the same way as one raised at session teardown
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from exam_tracker.core.errors import DatabaseError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def translate_db_errors(
    session: AsyncSession, operation: str,
) -> AsyncGenerator[None, None]:
    """Roll back and re-raise any SQLAlchemy failure as DatabaseError."""
    try:
        yield
    except IntegrityError as e:
        await session.rollback()
        logger.error(f"DB integrity error during {operation}: {e}")
        raise DatabaseError("Integrity constraint violated", operation) from e
    except OperationalError as e:
        await session.rollback()
        logger.error(f"DB operational error during {operation}: {e}")
        raise DatabaseError("Connection or operational error", operation) from e
    except DBAPIError as e:
        await session.rollback()
        logger.error(f"DB driver error during {operation}: {e}")
        raise DatabaseError("Database driver error", operation) from e
    except SQLAlchemyError as e:
        await session.rollback()
        logger.error(f"SQLAlchemy error during {operation}: {e}")
        raise DatabaseError("Database operation failed", operation) from e


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 5, max_overflow: int = 10,
    ):
        engine_kwargs: dict = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size, max_overflow=max_overflow, pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            async with translate_db_errors(session, "session"):
                yield session
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    db_manager: DatabaseSessionManager | None = getattr(request.app.state, "db", None)
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
