"""Exam ORM — a passed exam: course, score and date, optionally owned by a user.

Invariants:
    - score in [18, 31] (enforced by core/enforce_exam.py and a CHECK constraint)
    - (user_id, course_code) is unique: one record per course per owner
    - course_code is unique among ownerless rows (partial index; NULL user_ids never collide)
    - user_id is NULL only for exams created with authentication disabled

Design Decisions:
    - Integer surrogate id: update responses report it back to the client
    - ondelete=CASCADE on user_id: removing a user removes their exams
"""

import datetime

from sqlalchemy import (
    CheckConstraint, Date, ForeignKey, Index, Integer, String, UniqueConstraint, text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from exam_tracker.db.base import Base


class Exam(Base):
    """Exam entity."""
    __tablename__ = "exams"
    __table_args__ = (
        UniqueConstraint("user_id", "course_code", name="uq_exams_user_course"),
        Index(
            "uq_exams_shared_course", "course_code", unique=True,
            sqlite_where=text("user_id IS NULL"),
            postgresql_where=text("user_id IS NULL"),
        ),
        CheckConstraint("score BETWEEN 18 AND 31", name="ck_exams_score_range"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    course_code: Mapped[str] = mapped_column(
        String(7), ForeignKey("courses.code"), nullable=False,
    )
    user_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=True,
    )
    score: Mapped[int] = mapped_column(Integer, nullable=False)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)

    course: Mapped["Course"] = relationship("Course", back_populates="exams")
    owner: Mapped["User"] = relationship("User", back_populates="exams")
