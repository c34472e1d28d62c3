"""Exam Service — course lookups and the exam create/update/delete state transitions.

Invariants:
    - Validation (core/enforce_exam.py) runs before any storage call; a rejected
      request never reaches the repositories
    - principal=None means shared exams (authentication disabled); otherwise every
      read and write is scoped to the principal's own records
    - Storage failures propagate as DatabaseError with no retry
"""

import logging
from datetime import date
from typing import Callable

from exam_tracker.core.domain_types import ExamDraft, ExamId, Locale, Principal
from exam_tracker.core.enforce_exam import check_exam_draft, require_course_code
from exam_tracker.core.errors import DatabaseError, ErrorContext, ResourceNotFoundError
from exam_tracker.core.repository_protocols import CourseRepository, ExamRepository

logger = logging.getLogger(__name__)


class ExamService:
    """Resource handler for courses and exams."""

    def __init__(
        self,
        courses: CourseRepository,
        exams: ExamRepository,
        locale: Locale = Locale.EN,
        reject_future_dates: bool = True,
        today: Callable[[], date] = date.today,
    ):
        self.courses = courses
        self.exams = exams
        self.locale = locale
        self.reject_future_dates = reject_future_dates
        self._today = today

    async def list_courses(self) -> list[dict]:
        return await self.courses.list_courses()

    async def get_course(self, code: str) -> dict:
        course_code = require_course_code(code)
        course = await self.courses.get_course(course_code)
        if course is None:
            raise ResourceNotFoundError("Course", course_code)
        return course

    async def list_exams(self, principal: Principal | None = None) -> list[dict]:
        return await self.exams.list_exams(_owner(principal))

    async def create_exam(
        self, draft: ExamDraft, principal: Principal | None = None,
    ) -> ExamId:
        self._validate(draft)
        try:
            exam_id = await self.exams.create_exam(draft, _owner(principal))
        except DatabaseError as e:
            raise DatabaseError(
                f"could not create exam {draft.code}", "create",
                _context(draft, principal),
            ) from e
        logger.info(
            f"Exam {draft.code} created",
            extra={"exam_code": draft.code, "user_id": _owner(principal)},
        )
        return exam_id

    async def update_exam(
        self, draft: ExamDraft, principal: Principal | None = None,
    ) -> ExamId:
        self._validate(draft)
        try:
            exam_id = await self.exams.update_exam(draft, _owner(principal))
        except DatabaseError as e:
            raise DatabaseError(
                f"could not update exam {draft.code}", "update",
                _context(draft, principal),
            ) from e
        if exam_id is None:
            raise ResourceNotFoundError(
                "Exam", draft.code, _context(draft, principal),
            )
        logger.info(
            f"Exam {draft.code} updated",
            extra={"exam_code": draft.code, "user_id": _owner(principal)},
        )
        return exam_id

    async def delete_exam(
        self, code: str, principal: Principal | None = None,
    ) -> None:
        """Idempotent: deleting an exam that does not exist still succeeds."""
        course_code = require_course_code(code)
        try:
            deleted = await self.exams.delete_exam(course_code, _owner(principal))
        except DatabaseError as e:
            raise DatabaseError(
                f"could not delete exam {course_code}", "delete",
                ErrorContext(user_id=_owner(principal), exam_code=course_code),
            ) from e
        logger.info(
            f"Exam {course_code} deleted ({deleted} row(s))",
            extra={"exam_code": course_code, "user_id": _owner(principal)},
        )

    def _validate(self, draft: ExamDraft) -> None:
        check_exam_draft(
            draft, self._today(), self.locale, self.reject_future_dates,
        )


def _owner(principal: Principal | None):
    return principal.id if principal else None


def _context(draft: ExamDraft, principal: Principal | None) -> ErrorContext:
    return ErrorContext(user_id=_owner(principal), exam_code=draft.code)
