"""Error Handlers — global exception handlers for the exam-tracker API.

Invariants:
    - ExamTrackerError → its own http_status and to_response() envelope
    - RequestValidationError → the same 422 envelope as ExamValidationError
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Client errors log at WARNING, infrastructure errors at ERROR
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from exam_tracker.core.errors import (
    ErrorCategory,
    ErrorSeverity,
    ExamTrackerError,
    ExamValidationError,
    FieldError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ExamTrackerError)
    async def exam_tracker_error_handler(request: Request, exc: ExamTrackerError):
        """Handle all domain/infrastructure errors."""
        level = (
            logging.ERROR if exc.severity == ErrorSeverity.CRITICAL
            else logging.WARNING
        )
        logger.log(
            level,
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "user_id": exc.context.user_id,
                "exam_code": exc.context.exam_code,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors with the shared 422 envelope."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        error = ExamValidationError(_field_errors(exc))
        return JSONResponse(
            status_code=error.http_status,
            content=error.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
                "category": ErrorCategory.INTERNAL.value,
                "severity": ErrorSeverity.CRITICAL.value,
            },
        )


def _field_errors(exc: RequestValidationError) -> list[FieldError]:
    """Flatten Pydantic error dicts: loc ("body", "score") → location "body", field "score"."""
    field_errors = []
    for e in exc.errors():
        loc = [str(part) for part in e["loc"]]
        if len(loc) > 1:
            location, field = loc[0], ".".join(loc[1:])
        else:
            location, field = "body", "".join(loc)
        value = e.get("input")
        field_errors.append(FieldError(
            field=field,
            message=e["msg"],
            type=e["type"],
            location=location,
            value=value if isinstance(value, (str, int, float, bool)) else None,
        ))
    return field_errors
