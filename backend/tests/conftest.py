"""Root conftest — shared test configuration."""

import os

# Never touch a developer database from the test run
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
