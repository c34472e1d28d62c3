"""Initial schema — courses, users, exams.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "courses",
        sa.Column("code", sa.String(7), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("cfu", sa.Integer, nullable=False, server_default="6"),
    )

    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(255), nullable=False, unique=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
    )

    op.create_table(
        "exams",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("course_code", sa.String(7), sa.ForeignKey("courses.code"), nullable=False),
        sa.Column(
            "user_id", sa.Integer,
            sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=True,
        ),
        sa.Column("score", sa.Integer, nullable=False),
        sa.Column("date", sa.Date, nullable=False),
        sa.UniqueConstraint("user_id", "course_code", name="uq_exams_user_course"),
        sa.CheckConstraint("score BETWEEN 18 AND 31", name="ck_exams_score_range"),
    )
    op.create_index("ix_exams_user_id", "exams", ["user_id"])
    op.create_index(
        "uq_exams_shared_course", "exams", ["course_code"], unique=True,
        sqlite_where=sa.text("user_id IS NULL"),
        postgresql_where=sa.text("user_id IS NULL"),
    )


def downgrade() -> None:
    op.drop_index("uq_exams_shared_course", table_name="exams")
    op.drop_index("ix_exams_user_id", table_name="exams")
    op.drop_table("exams")
    op.drop_table("users")
    op.drop_table("courses")
