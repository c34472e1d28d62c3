"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - CourseCode wraps the 7-char course identifier (two digits + five uppercase letters)
    - Principal never carries credential material (no password, no hash)
    - ExamDraft is the validated shape of an exam before it reaches storage
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType for identifiers: zero runtime cost, full type-checker support
    - Frozen dataclasses for values that cross the core/storage boundary
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
ExamId = NewType("ExamId", int)
CourseCode = NewType("CourseCode", str)
SessionToken = NewType("SessionToken", str)


# ─── Enums ───────────────────────────────────────────────────────

class Locale(str, Enum):
    """Languages available for user-facing validation messages."""
    EN = "en"
    IT = "it"


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class Principal:
    """Authenticated user identity attached to a session."""
    id: UserId
    username: str
    name: str


@dataclass(frozen=True)
class ExamDraft:
    """Exam fields that passed shape validation (score range, code length, date format)."""
    code: CourseCode
    score: int
    date: date
