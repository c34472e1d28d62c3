"""Language Strings — centralized locale-specific text for user-facing validation messages.

Invariants:
    - All strings are pure data (no IO, no computation beyond formatting)
    - Covers every locale in the Locale enum
    - Dates shown to users are formatted DD/MM/YYYY regardless of locale
"""

from datetime import date

from exam_tracker.core.domain_types import Locale

USER_DATE_FORMAT = "%d/%m/%Y"


_INVALID_EXAM_DATE: dict[Locale, str] = {
    Locale.EN: "The date {date} is not valid.",
    Locale.IT: "La data {date} non è valida.",
}

_FUTURE_EXAM_DATE_DETAIL: dict[Locale, str] = {
    Locale.EN: "Exam date cannot be in the future",
    Locale.IT: "La data dell'esame non può essere nel futuro",
}


def format_user_date(value: date) -> str:
    return value.strftime(USER_DATE_FORMAT)


def get_invalid_exam_date_message(value: date, locale: Locale) -> str:
    """Message naming the offending date, e.g. 'La data 06/05/2031 non è valida.'"""
    return _INVALID_EXAM_DATE[locale].format(date=format_user_date(value))


def get_future_exam_date_detail(locale: Locale) -> str:
    return _FUTURE_EXAM_DATE_DETAIL[locale]
