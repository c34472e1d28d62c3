"""Exam Enforcement — tests for pure course code, score and date validation.

Tests cover:
    - check_course_code length and pattern rules (body vs path strictness)
    - require_course_code raises a 422-mapped error
    - check_score inclusive bounds and type rules
    - parse_exam_date strict YYYY-MM-DD parsing
    - check_exam_draft future-date rule and its localized message
"""

from datetime import date

import pytest

from exam_tracker.core.domain_types import CourseCode, ExamDraft, Locale
from exam_tracker.core.enforce_exam import (
    MAX_SCORE,
    MIN_SCORE,
    check_course_code,
    check_exam_date_not_future,
    check_exam_draft,
    check_score,
    parse_exam_date,
    require_course_code,
)
from exam_tracker.core.errors import ExamValidationError

TODAY = date(2021, 6, 1)


def _draft(code="01TXYOV", score=30, exam_date=date(2021, 5, 6)):
    return ExamDraft(code=CourseCode(code), score=score, date=exam_date)


# ─── check_course_code ───────────────────────────────────────────

def test_valid_course_code_has_no_errors():
    assert check_course_code("01TXYOV") == []


@pytest.mark.parametrize("code", ["abc", "01TXYO", "01TXYOVV", ""])
def test_wrong_length_course_code_rejected(code):
    errors = check_course_code(code)
    assert len(errors) == 1
    assert errors[0].field == "code"
    assert errors[0].type == "string_length"


@pytest.mark.parametrize("code", ["01txyov", "AB12345", "0123456", "1ATXYOV"])
def test_pattern_mismatch_rejected(code):
    errors = check_course_code(code)
    assert errors[0].type == "string_pattern_mismatch"


def test_body_codes_only_need_length():
    assert check_course_code("abcdefg", location="body", require_pattern=False) == []


def test_require_course_code_returns_code():
    assert require_course_code("02LSEOV") == "02LSEOV"


def test_require_course_code_raises_validation_error():
    with pytest.raises(ExamValidationError) as exc_info:
        require_course_code("abc")
    assert exc_info.value.http_status == 422
    assert exc_info.value.errors[0].location == "params"


# ─── check_score ─────────────────────────────────────────────────

@pytest.mark.parametrize("score", [MIN_SCORE, 24, 30, MAX_SCORE])
def test_scores_in_range_accepted(score):
    assert check_score(score) == []


@pytest.mark.parametrize("score", [0, 17, 32, -18])
def test_scores_out_of_range_rejected(score):
    assert check_score(score)[0].type == "int_range"


@pytest.mark.parametrize("score", [30.5, "30", True, None])
def test_non_integer_scores_rejected(score):
    assert check_score(score)[0].type == "int_type"


# ─── parse_exam_date ─────────────────────────────────────────────

def test_parse_exam_date_accepts_strict_format():
    assert parse_exam_date("2021-05-06") == date(2021, 5, 6)


@pytest.mark.parametrize(
    "value", ["2021-5-6", "06/05/2021", "20210506", "2021-02-30", "2021-13-01", "2021-05-06T10:00"],
)
def test_parse_exam_date_rejects_other_shapes(value):
    with pytest.raises(ValueError):
        parse_exam_date(value)


# ─── check_exam_draft ────────────────────────────────────────────

def test_past_exam_passes():
    check_exam_draft(_draft(), TODAY, Locale.EN)


def test_exam_dated_today_passes():
    check_exam_draft(_draft(exam_date=TODAY), TODAY, Locale.EN)


def test_future_exam_rejected_with_date_in_message():
    with pytest.raises(ExamValidationError) as exc_info:
        check_exam_draft(_draft(exam_date=date(2021, 6, 2)), TODAY, Locale.EN)
    assert exc_info.value.message == "The date 02/06/2021 is not valid."
    assert exc_info.value.errors[0].field == "date"
    assert exc_info.value.errors[0].type == "date_in_future"


def test_future_exam_message_is_localized():
    with pytest.raises(ExamValidationError) as exc_info:
        check_exam_draft(_draft(exam_date=date(2031, 5, 6)), TODAY, Locale.IT)
    assert exc_info.value.message == "La data 06/05/2031 non è valida."


def test_future_exam_allowed_when_check_disabled():
    check_exam_draft(
        _draft(exam_date=date(2031, 5, 6)), TODAY, Locale.EN, reject_future_dates=False,
    )


def test_bad_score_and_code_reported_together():
    with pytest.raises(ExamValidationError) as exc_info:
        check_exam_draft(_draft(code="abc", score=12), TODAY, Locale.EN)
    assert {e.field for e in exc_info.value.errors} == {"code", "score"}


def test_check_exam_date_not_future_returns_none_for_past():
    assert check_exam_date_not_future(date(2020, 1, 1), TODAY, Locale.EN) is None
