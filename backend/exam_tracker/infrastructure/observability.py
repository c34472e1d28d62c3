"""Structured Logging — JSON formatter, setup, and per-request access logging.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (user_id, exam_code, error_code, path...) surfaced when present
    - JSON format in production, human-readable in development
    - Access log never records request bodies (login bodies carry passwords)
"""

import json
import logging
import time
from datetime import datetime, timezone

from fastapi import Request

_EXTRA_FIELDS = (
    "user_id", "exam_code", "error_code", "path", "method",
    "status_code", "duration_ms",
)

access_logger = logging.getLogger("exam_tracker.access")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))


async def log_requests(request: Request, call_next):
    """HTTP middleware: one access line per request (method, path, status, duration)."""
    started = time.perf_counter()
    response = await call_next(request)
    duration_ms = round((time.perf_counter() - started) * 1000, 1)
    access_logger.info(
        f"{request.method} {request.url.path} {response.status_code} {duration_ms} ms",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response
