"""Seed reference data — course catalogue and demo users.

Revision ID: 002_seed
Revises: 001_initial
Create Date: 2026-10-18

Users are never created through the API, so the demo accounts ship with
the schema. Passwords are hashed with the same passlib context the API
verifies against.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from exam_tracker.infrastructure.user_store import hash_password

revision: str = "002_seed"
down_revision: Union[str, None] = "001_initial"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

COURSES = [
    ("01TYMOV", "Information systems security", 6),
    ("02LSEOV", "Computer architectures", 10),
    ("01SQJOV", "Data Science and Database Technology", 8),
    ("01OTWOV", "Computer network technologies and services", 6),
    ("04GSPOV", "Software engineering", 8),
    ("01TXYOV", "Web Applications I", 6),
    ("01NYHOV", "System and device programming", 10),
    ("01TYDOV", "Cloud computing", 6),
    ("03FYZOV", "Big data processing and analytics", 6),
    ("01SQOOV", "Data Science and Machine Learning", 8),
]

USERS = [
    ("john.doe@polito.it", "John", "password"),
    ("mario.rossi@polito.it", "Mario", "password"),
]


def upgrade() -> None:
    courses = sa.table(
        "courses",
        sa.column("code", sa.String), sa.column("name", sa.String), sa.column("cfu", sa.Integer),
    )
    users = sa.table(
        "users",
        sa.column("username", sa.String), sa.column("name", sa.String),
        sa.column("password_hash", sa.String),
    )
    op.bulk_insert(courses, [
        {"code": code, "name": name, "cfu": cfu} for code, name, cfu in COURSES
    ])
    op.bulk_insert(users, [
        {"username": username, "name": name, "password_hash": hash_password(password)}
        for username, name, password in USERS
    ])


def downgrade() -> None:
    op.execute(
        sa.text("DELETE FROM users WHERE username IN :usernames").bindparams(
            sa.bindparam("usernames", [u[0] for u in USERS], expanding=True),
        ),
    )
    op.execute(
        sa.text("DELETE FROM courses WHERE code IN :codes").bindparams(
            sa.bindparam("codes", [c[0] for c in COURSES], expanding=True),
        ),
    )
