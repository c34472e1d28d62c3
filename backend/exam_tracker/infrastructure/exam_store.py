"""SQL Course & Exam Stores — SQLAlchemy implementations of the course and exam repositories.

Invariants:
    - Every operation runs inside translate_db_errors: callers only ever see DatabaseError
    - Each mutation commits on its own; there is no cross-operation transaction
    - owner=None disables per-user scoping (exams keyed by course code alone)
    - Exam rows are returned as plain dicts {id, code, name, score, date}

Design Decisions:
    - Outer join to courses when listing: an exam whose course row is missing still shows up
"""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from exam_tracker.core.domain_types import CourseCode, ExamDraft, ExamId, UserId
from exam_tracker.infrastructure.database import translate_db_errors
from exam_tracker.models.course import Course
from exam_tracker.models.exam import Exam


def _course_to_dict(course: Course) -> dict:
    return {"code": course.code, "name": course.name, "cfu": course.cfu}


class SqlCourseStore:
    """Read-only access to the course catalogue."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_courses(self) -> list[dict]:
        async with translate_db_errors(self.db, "list_courses"):
            result = await self.db.execute(
                select(Course).order_by(Course.name, Course.code),
            )
            return [_course_to_dict(c) for c in result.scalars().all()]

    async def get_course(self, code: CourseCode) -> dict | None:
        async with translate_db_errors(self.db, "get_course"):
            result = await self.db.execute(
                select(Course).where(Course.code == code),
            )
            course = result.scalar_one_or_none()
            return _course_to_dict(course) if course else None


class SqlExamStore:
    """Exam persistence, optionally scoped to an owning user."""

    def __init__(self, db: AsyncSession):
        self.db = db

    def _scoped(self, query, code: CourseCode | None, owner: UserId | None):
        if code is not None:
            query = query.where(Exam.course_code == code)
        if owner is not None:
            query = query.where(Exam.user_id == owner)
        return query

    async def list_exams(self, owner: UserId | None = None) -> list[dict]:
        query = (
            select(Exam, Course.name)
            .outerjoin(Course, Exam.course_code == Course.code)
            .order_by(Exam.date, Exam.course_code)
        )
        query = self._scoped(query, None, owner)
        async with translate_db_errors(self.db, "list_exams"):
            result = await self.db.execute(query)
            return [
                {
                    "id": exam.id,
                    "code": exam.course_code,
                    "name": name,
                    "score": exam.score,
                    "date": exam.date,
                }
                for exam, name in result.all()
            ]

    async def create_exam(
        self, exam: ExamDraft, owner: UserId | None = None,
    ) -> ExamId:
        row = Exam(
            course_code=exam.code, user_id=owner,
            score=exam.score, date=exam.date,
        )
        async with translate_db_errors(self.db, "create_exam"):
            self.db.add(row)
            await self.db.commit()
            await self.db.refresh(row)
        return ExamId(row.id)

    async def update_exam(
        self, exam: ExamDraft, owner: UserId | None = None,
    ) -> ExamId | None:
        """Update score/date of the matching exam(s). None when nothing matched."""
        async with translate_db_errors(self.db, "update_exam"):
            result = await self.db.execute(
                self._scoped(select(Exam), exam.code, owner).order_by(Exam.id),
            )
            rows = result.scalars().all()
            if not rows:
                return None
            for row in rows:
                row.score = exam.score
                row.date = exam.date
            await self.db.commit()
        return ExamId(rows[0].id)

    async def delete_exam(
        self, code: CourseCode, owner: UserId | None = None,
    ) -> int:
        """Delete matching exam(s); returns the number of rows removed."""
        async with translate_db_errors(self.db, "delete_exam"):
            result = await self.db.execute(
                self._scoped(delete(Exam), code, owner),
            )
            await self.db.commit()
        return result.rowcount
