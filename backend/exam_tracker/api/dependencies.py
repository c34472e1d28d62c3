"""Request Dependencies — wiring of stores and services, and the authentication gate.

Invariants:
    - The session store lives on app.state.session_store (one per application)
    - require_principal runs before body validation results are reported, so an
      unauthenticated mutation gets 401 even when its body is also invalid
    - With auth_required=False, require_principal yields None (shared exams)
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from exam_tracker.config import Settings, get_settings
from exam_tracker.core.domain_types import Principal, SessionToken
from exam_tracker.core.repository_protocols import SessionStore
from exam_tracker.infrastructure.database import get_db
from exam_tracker.infrastructure.exam_store import SqlCourseStore, SqlExamStore
from exam_tracker.infrastructure.user_store import SqlUserStore
from exam_tracker.services.auth_service import AuthService
from exam_tracker.services.exam_service import ExamService


def get_session_store(request: Request) -> SessionStore:
    store = getattr(request.app.state, "session_store", None)
    if store is None:
        raise RuntimeError("Session store not initialized")
    return store


def get_exam_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> ExamService:
    return ExamService(
        SqlCourseStore(db),
        SqlExamStore(db),
        locale=settings.message_locale,
        reject_future_dates=settings.reject_future_exam_dates,
    )


def get_auth_service(
    db: AsyncSession = Depends(get_db),
    sessions: SessionStore = Depends(get_session_store),
) -> AuthService:
    return AuthService(SqlUserStore(db), sessions)


def get_session_token(
    request: Request, settings: Settings = Depends(get_settings),
) -> SessionToken | None:
    token = request.cookies.get(settings.session_cookie_name)
    return SessionToken(token) if token else None


async def require_principal(
    token: SessionToken | None = Depends(get_session_token),
    auth: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
) -> Principal | None:
    """Gate for exam routes: 401 without a valid session (when auth is required)."""
    if not settings.auth_required:
        return None
    return await auth.current_principal(token)
