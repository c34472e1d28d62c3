"""User ORM — credentials of the people who may log in.

Invariants:
    - username is unique
    - password_hash is a passlib hash string; the clear password is never stored
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from exam_tracker.db.base import Base


class User(Base):
    """User entity — owner of exams in authenticated deployments."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    exams: Mapped[list["Exam"]] = relationship(
        "Exam", back_populates="owner", cascade="all, delete-orphan",
    )
