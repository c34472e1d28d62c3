"""Session Routes — login, logout and "who am I" for the cookie-based session.

Invariants:
    - POST: 200 + principal + session cookie, or 401 with the generic credentials message
    - POST replaces any session the request already carried
    - DELETE /current: always 200 with an empty body, logged in or not
    - GET /current: 200 + principal, or 401 {error: "Unauthenticated user!"}
"""

from fastapi import APIRouter, Depends, Response, status

from exam_tracker.api.dependencies import get_auth_service, get_session_token
from exam_tracker.config import Settings, get_settings
from exam_tracker.core.domain_types import SessionToken
from exam_tracker.schemas.user import LoginRequest, PrincipalResponse
from exam_tracker.services.auth_service import AuthService

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


@router.post("", response_model=PrincipalResponse)
async def login(
    body: LoginRequest,
    response: Response,
    previous: SessionToken | None = Depends(get_session_token),
    auth: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
):
    principal = await auth.authenticate(body.username, body.password)
    if previous:
        auth.end_session(previous)
    token = auth.establish_session(principal)
    response.set_cookie(
        settings.session_cookie_name,
        token,
        max_age=settings.session_ttl_seconds,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )
    return PrincipalResponse.from_principal(principal)


@router.delete("/current")
async def logout(
    token: SessionToken | None = Depends(get_session_token),
    auth: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
):
    auth.end_session(token)
    response = Response(status_code=status.HTTP_200_OK)
    response.delete_cookie(settings.session_cookie_name)
    return response


@router.get("/current", response_model=PrincipalResponse)
async def current_session(
    token: SessionToken | None = Depends(get_session_token),
    auth: AuthService = Depends(get_auth_service),
):
    principal = await auth.current_principal(token, message="Unauthenticated user!")
    return PrincipalResponse.from_principal(principal)
