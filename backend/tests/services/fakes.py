"""In-memory repository fakes for service tests — record every storage call."""

from exam_tracker.core.domain_types import ExamId, Principal, UserId
from exam_tracker.core.errors import DatabaseError


class FakeCourseRepository:
    def __init__(self, courses: list[dict] | None = None):
        self.courses = {c["code"]: c for c in courses or []}
        self.calls: list[str] = []

    async def list_courses(self):
        self.calls.append("list_courses")
        return list(self.courses.values())

    async def get_course(self, code):
        self.calls.append("get_course")
        return self.courses.get(code)


class FakeExamRepository:
    def __init__(self, fail: bool = False):
        self.rows: list[dict] = []
        self.calls: list[str] = []
        self.fail = fail

    def _check(self, op: str):
        self.calls.append(op)
        if self.fail:
            raise DatabaseError("boom", op)

    def _match(self, code, owner):
        return [
            r for r in self.rows
            if r["code"] == code and (owner is None or r["user_id"] == owner)
        ]

    async def list_exams(self, owner=None):
        self._check("list_exams")
        return [r for r in self.rows if owner is None or r["user_id"] == owner]

    async def create_exam(self, exam, owner=None):
        self._check("create_exam")
        row = {
            "id": len(self.rows) + 1, "code": exam.code, "score": exam.score,
            "date": exam.date, "user_id": owner,
        }
        self.rows.append(row)
        return ExamId(row["id"])

    async def update_exam(self, exam, owner=None):
        self._check("update_exam")
        matches = self._match(exam.code, owner)
        for r in matches:
            r.update(score=exam.score, date=exam.date)
        return ExamId(matches[0]["id"]) if matches else None

    async def delete_exam(self, code, owner=None):
        self._check("delete_exam")
        matches = self._match(code, owner)
        self.rows = [r for r in self.rows if r not in matches]
        return len(matches)


class FakeUserRepository:
    def __init__(self, users: dict[str, tuple[Principal, str]]):
        self.users = users

    async def get_user(self, username, password):
        entry = self.users.get(username)
        if entry is None or entry[1] != password:
            return None
        return entry[0]

    async def get_user_by_id(self, user_id: UserId):
        for principal, _ in self.users.values():
            if principal.id == user_id:
                return principal
        return None
