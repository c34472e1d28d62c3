"""Exam Tracker API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ExamTrackerError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database manager created in the lifespan, held on app.state.db, disposed at shutdown
    - Session store created once with the app, held on app.state.session_store

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Session store attached at import time (not in the lifespan) so ASGI test
      transports that skip lifespan events still find it
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from exam_tracker.api.error_handlers import register_error_handlers
from exam_tracker.api.routes import courses, exams, health, sessions
from exam_tracker.config import get_settings
from exam_tracker.infrastructure.database import DatabaseSessionManager
from exam_tracker.infrastructure.observability import log_requests, setup_logging
from exam_tracker.infrastructure.session_store import InMemorySessionStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.db = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Exam Tracker API started")
    yield
    logger.info("Exam Tracker API shutting down")
    app.state.session_store.clear()
    await app.state.db.close()


app = FastAPI(title="Exam Tracker API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.state.session_store = InMemorySessionStore(settings.session_ttl_seconds)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(log_requests)

register_error_handlers(app)

app.include_router(health.router)
app.include_router(courses.router)
app.include_router(exams.router)
app.include_router(sessions.router)
