"""Exam Schemas — Pydantic models with field-level validation for exam bodies.

Invariants:
    - ExamInput.code: exactly 7 chars (pattern is only enforced on path parameters)
    - ExamInput.score: integer in [18, 31]; numeric strings such as "31" are coerced
    - ExamInput.date: strict YYYY-MM-DD string, parsed to a calendar date

Design Decisions:
    - Date parsing delegates to core/enforce_exam.parse_exam_date so the body and the
      core agree on what a well-formed date is
"""

import datetime

from pydantic import BaseModel, Field, field_validator

from exam_tracker.core.domain_types import CourseCode, ExamDraft
from exam_tracker.core.enforce_exam import (
    COURSE_CODE_LENGTH, MAX_SCORE, MIN_SCORE, parse_exam_date,
)


class ExamInput(BaseModel):
    """Body of POST and PUT /api/exams."""
    code: str = Field(min_length=COURSE_CODE_LENGTH, max_length=COURSE_CODE_LENGTH)
    score: int = Field(ge=MIN_SCORE, le=MAX_SCORE)
    date: datetime.date

    @field_validator("date", mode="before")
    @classmethod
    def parse_strict_date(cls, v):
        if not isinstance(v, str):
            raise ValueError("date must be a string formatted YYYY-MM-DD")
        return parse_exam_date(v)

    def to_draft(self) -> ExamDraft:
        return ExamDraft(code=CourseCode(self.code), score=self.score, date=self.date)


class ExamResponse(BaseModel):
    """One exam as listed by GET /api/exams."""
    id: int
    code: str
    name: str | None = None
    score: int
    date: datetime.date


class ExamUpdateResponse(BaseModel):
    id: int
    message: str
