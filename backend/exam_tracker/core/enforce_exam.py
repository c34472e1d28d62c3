"""Exam Input Enforcement — pure checks on course codes, scores and exam dates.

Invariants:
    - Every check is PURE: takes values (and "today"), returns FieldErrors or raises, no IO
    - A course code is exactly 7 chars: two digits followed by five uppercase letters
    - A score is an integer in [MIN_SCORE, MAX_SCORE]; 31 encodes "30 cum laude"
    - An exam date is a real calendar date written strictly as YYYY-MM-DD
    - With future dates rejected, today's date is still accepted

Design Decisions:
    - Pydantic schemas call parse_exam_date / check_course_code for body fields, and the
      service re-runs check_exam_draft before storage so the invariants hold for any caller
"""

import re
from datetime import date, datetime

from exam_tracker.core.domain_types import CourseCode, ExamDraft, Locale
from exam_tracker.core.errors import ExamValidationError, FieldError
from exam_tracker.core.language_strings import (
    get_future_exam_date_detail,
    get_invalid_exam_date_message,
)

COURSE_CODE_LENGTH: int = 7
COURSE_CODE_PATTERN = re.compile(r"\d\d[A-Z]{5}")
MIN_SCORE: int = 18
MAX_SCORE: int = 31
EXAM_DATE_FORMAT = "%Y-%m-%d"
_EXAM_DATE_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2}")


def check_course_code(
    code: str, location: str = "params", require_pattern: bool = True,
) -> list[FieldError]:
    """Length is always checked; the digit/letter pattern only where require_pattern."""
    if len(code) != COURSE_CODE_LENGTH:
        return [FieldError(
            field="code",
            message=f"Course code must be exactly {COURSE_CODE_LENGTH} characters",
            type="string_length",
            location=location,
            value=code,
        )]
    if require_pattern and not COURSE_CODE_PATTERN.fullmatch(code):
        return [FieldError(
            field="code",
            message="Course code must be two digits followed by five uppercase letters",
            type="string_pattern_mismatch",
            location=location,
            value=code,
        )]
    return []


def require_course_code(code: str) -> CourseCode:
    """Validate a path-supplied course code or raise a 422."""
    errors = check_course_code(code)
    if errors:
        raise ExamValidationError(errors)
    return CourseCode(code)


def check_score(score: int) -> list[FieldError]:
    if isinstance(score, bool) or not isinstance(score, int):
        return [FieldError(
            field="score", message="Score must be an integer",
            type="int_type", value=score,
        )]
    if not MIN_SCORE <= score <= MAX_SCORE:
        return [FieldError(
            field="score",
            message=f"Score must be between {MIN_SCORE} and {MAX_SCORE}",
            type="int_range",
            value=score,
        )]
    return []


def parse_exam_date(value: str) -> date:
    """Strict YYYY-MM-DD parse. Raises ValueError on any other shape or an impossible date."""
    if not _EXAM_DATE_SHAPE.fullmatch(value):
        raise ValueError(f"date must be formatted YYYY-MM-DD, got {value!r}")
    return datetime.strptime(value, EXAM_DATE_FORMAT).date()


def check_exam_date_not_future(
    exam_date: date, today: date, locale: Locale,
) -> FieldError | None:
    if exam_date > today:
        return FieldError(
            field="date",
            message=get_future_exam_date_detail(locale),
            type="date_in_future",
            value=exam_date.isoformat(),
        )
    return None


def check_exam_draft(
    draft: ExamDraft,
    today: date,
    locale: Locale,
    reject_future_dates: bool = True,
) -> None:
    """Rule: no exam reaches storage with a bad code, score or date. Raises ExamValidationError."""
    errors = [
        *check_course_code(draft.code, location="body", require_pattern=False),
        *check_score(draft.score),
    ]
    if errors:
        raise ExamValidationError(errors)

    if reject_future_dates:
        future = check_exam_date_not_future(draft.date, today, locale)
        if future:
            raise ExamValidationError(
                [future], message=get_invalid_exam_date_message(draft.date, locale),
            )
