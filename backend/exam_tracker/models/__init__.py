"""ORM Models — SQLAlchemy declarative models for courses, users and exams.

Invariants:
    - All models inherit from Base (db/base.py)
    - Courses and users are reference data; only exams are written by the API

Design Decisions:
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from exam_tracker.models.course import Course  # noqa: F401
from exam_tracker.models.user import User  # noqa: F401
from exam_tracker.models.exam import Exam  # noqa: F401
