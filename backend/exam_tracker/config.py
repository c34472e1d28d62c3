"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets and deployment knobs come from environment variables or .env
    - get_settings() is cached (lru_cache) — single instance per process
    - Routes receive settings through Depends(get_settings), so tests can override them

Design Decisions:
    - auth_required / reject_future_exam_dates select between the behaviours of the
      earlier (open, shared exams) and later (session-scoped exams) server iterations
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from exam_tracker.core.domain_types import Locale


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./exams.sqlite"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 5
    database_max_overflow: int = 10

    # Exams
    auth_required: bool = True
    reject_future_exam_dates: bool = True
    message_locale: Locale = Locale.EN

    # Sessions
    session_cookie_name: str = "exams_session"
    session_ttl_seconds: int = 24 * 60 * 60
    session_cookie_secure: bool = False

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
