"""Exam Schemas — body validation at the API boundary.

Invariants:
    - Numeric strings are coerced for score ("31" → 31)
    - code must be exactly 7 characters; the pattern is not required in bodies
    - date must be a strict YYYY-MM-DD string
"""

from datetime import date

import pytest
from pydantic import ValidationError

from exam_tracker.schemas.exam import ExamInput


def test_valid_body_converts_to_draft():
    draft = ExamInput(code="01TXYOV", score=30, date="2021-05-06").to_draft()
    assert draft.code == "01TXYOV"
    assert draft.score == 30
    assert draft.date == date(2021, 5, 6)


def test_numeric_string_score_is_coerced():
    assert ExamInput(code="01TXYOV", score="31", date="2021-05-06").score == 31


@pytest.mark.parametrize("score", [17, 32, 30.5, "thirty"])
def test_bad_scores_rejected(score):
    with pytest.raises(ValidationError) as exc_info:
        ExamInput(code="01TXYOV", score=score, date="2021-05-06")
    assert exc_info.value.errors()[0]["loc"] == ("score",)


def test_short_code_rejected():
    with pytest.raises(ValidationError) as exc_info:
        ExamInput(code="abc", score="31", date="2021-05-06")
    assert [e["loc"] for e in exc_info.value.errors()] == [("code",)]


@pytest.mark.parametrize("value", ["2021-5-6", "06/05/2021", "2021-02-30", 20210506])
def test_non_strict_dates_rejected(value):
    with pytest.raises(ValidationError) as exc_info:
        ExamInput(code="01TXYOV", score=30, date=value)
    assert exc_info.value.errors()[0]["loc"] == ("date",)


def test_missing_fields_reported():
    with pytest.raises(ValidationError) as exc_info:
        ExamInput()
    assert {e["loc"][0] for e in exc_info.value.errors()} == {"code", "score", "date"}
