"""Course ORM — read-only catalogue of courses that exams refer to.

Invariants:
    - code is the 7-char primary key (two digits + five uppercase letters)
    - cfu is the credit weight of the course
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from exam_tracker.db.base import Base


class Course(Base):
    """Course reference entity."""
    __tablename__ = "courses"

    code: Mapped[str] = mapped_column(String(7), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    cfu: Mapped[int] = mapped_column(Integer, nullable=False, default=6)

    exams: Mapped[list["Exam"]] = relationship(
        "Exam", back_populates="course",
    )
