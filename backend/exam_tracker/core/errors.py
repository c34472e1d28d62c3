"""Error Hierarchy — typed, categorized exceptions for all exam-tracker failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() always carries a top-level "error" string with the human-readable message
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ExamTrackerError base: FastAPI global handler catches all
    - ErrorCategory doubles as the error-kind tag that clients can switch on
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Error kinds — one per distinct failure path of the API."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    AUTHENTICATION = "authentication"
    UNAUTHENTICATED = "unauthenticated"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: int | None = None
    exam_code: str | None = None


@dataclass(frozen=True)
class FieldError:
    """One violated field constraint in a validation failure."""
    field: str
    message: str
    type: str
    location: str = "body"
    value: Any = None

    def to_dict(self) -> dict:
        data = {
            "location": self.location,
            "field": self.field,
            "message": self.message,
            "type": self.type,
        }
        if self.value is not None:
            data["value"] = self.value
        return data


class ExamTrackerError(Exception):
    """Base exception for all exam-tracker errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": self.message,
            "code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class ExamValidationError(ExamTrackerError):
    """Malformed or out-of-range input. Raised before storage is consulted."""
    def __init__(
        self,
        errors: list[FieldError],
        message: str = "Invalid request data",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 422,
        )
        self.errors = errors

    def to_response(self) -> dict:
        response = super().to_response()
        response["errors"] = [e.to_dict() for e in self.errors]
        return response


class ResourceNotFoundError(ExamTrackerError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} not found.",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class AuthenticationError(ExamTrackerError):
    """Credentials rejected. Same message whether the user or the password was wrong."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Incorrect username and/or password.",
            "AUTHENTICATION_FAILED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )

    def to_response(self) -> dict:
        response = super().to_response()
        response["message"] = self.message
        return response


class UnauthenticatedError(ExamTrackerError):
    """Request needs a principal but carries no valid session."""
    def __init__(
        self, message: str = "not authenticated", context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "UNAUTHENTICATED", ErrorCategory.UNAUTHENTICATED,
            ErrorSeverity.INFO, context, 401,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ExamTrackerError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
