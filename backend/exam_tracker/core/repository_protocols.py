"""Boundary Protocols — contracts between core services and storage collaborators.

Invariants:
    - Core NEVER imports from infrastructure — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Storage methods either return or raise DatabaseError; they never return error objects
    - owner=None means "shared exams": no per-user scoping is applied

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no inheritance
    - SessionStore is synchronous: it holds process-local state only
"""

from typing import Protocol

from exam_tracker.core.domain_types import (
    CourseCode, ExamDraft, ExamId, Principal, SessionToken, UserId,
)


class CourseRepository(Protocol):
    """Contract for read-only course reference data."""
    async def list_courses(self) -> list[dict]: ...
    async def get_course(self, code: CourseCode) -> dict | None: ...


class ExamRepository(Protocol):
    """Contract for exam persistence, optionally scoped to an owner."""
    async def list_exams(self, owner: UserId | None = None) -> list[dict]: ...
    async def create_exam(
        self, exam: ExamDraft, owner: UserId | None = None,
    ) -> ExamId: ...
    async def update_exam(
        self, exam: ExamDraft, owner: UserId | None = None,
    ) -> ExamId | None: ...
    async def delete_exam(
        self, code: CourseCode, owner: UserId | None = None,
    ) -> int: ...


class UserRepository(Protocol):
    """Contract for credential lookups — users are never created through the API."""
    async def get_user(self, username: str, password: str) -> Principal | None: ...
    async def get_user_by_id(self, user_id: UserId) -> Principal | None: ...


class SessionStore(Protocol):
    """Contract for server-side sessions holding only a principal id."""
    def create(self, user_id: UserId) -> SessionToken: ...
    def get(self, token: SessionToken) -> UserId | None: ...
    def destroy(self, token: SessionToken) -> None: ...
