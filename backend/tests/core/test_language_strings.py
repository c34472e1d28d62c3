"""Language Strings — tests for localized validation messages."""

from datetime import date

from exam_tracker.core.domain_types import Locale
from exam_tracker.core.language_strings import (
    format_user_date,
    get_future_exam_date_detail,
    get_invalid_exam_date_message,
)


def test_user_dates_are_day_first():
    assert format_user_date(date(2021, 5, 6)) == "06/05/2021"


def test_invalid_date_message_english():
    assert get_invalid_exam_date_message(date(2030, 1, 2), Locale.EN) == (
        "The date 02/01/2030 is not valid."
    )


def test_invalid_date_message_italian():
    assert get_invalid_exam_date_message(date(2030, 1, 2), Locale.IT) == (
        "La data 02/01/2030 non è valida."
    )


def test_every_locale_has_future_date_detail():
    for locale in Locale:
        assert get_future_exam_date_detail(locale)
