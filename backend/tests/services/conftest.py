"""Service test fixtures — async DB, seeded reference data, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB
    - Every test gets a fresh session store (no login leaks between tests)
    - Seeded users: id 1 john.doe@polito.it, id 2 mario.rossi@polito.it, password "password"
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from exam_tracker.config import Settings, get_settings
from exam_tracker.db.base import Base
from exam_tracker.infrastructure.database import DatabaseSessionManager, get_db
from exam_tracker.infrastructure.session_store import InMemorySessionStore
from exam_tracker.infrastructure.user_store import hash_password
from exam_tracker.main import app
from exam_tracker.models.course import Course
from exam_tracker.models.user import User

USER_PASSWORD = "password"
JOHN = "john.doe@polito.it"
MARIO = "mario.rossi@polito.it"


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def seed_reference_data(test_db):
    """Three courses and two users."""
    test_db.add_all([
        Course(code="01TXYOV", name="Web Applications I", cfu=6),
        Course(code="02LSEOV", name="Computer architectures", cfu=10),
        Course(code="04GSPOV", name="Software engineering", cfu=8),
        User(username=JOHN, name="John", password_hash=hash_password(USER_PASSWORD)),
        User(username=MARIO, name="Mario", password_hash=hash_password(USER_PASSWORD)),
    ])
    await test_db.commit()


@pytest.fixture
def settings_override():
    """Replace app settings for one test: settings_override(auth_required=False)."""
    def _override(**values):
        settings = Settings(**values)
        app.dependency_overrides[get_settings] = lambda: settings
        return settings
    return _override


@pytest.fixture
async def client(test_engine, test_session_factory, seed_reference_data):
    """FastAPI test client with DB dependency and session store replaced."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_store = app.state.session_store
    app.state.session_store = InMemorySessionStore()

    # Readiness probe reads app.state.db directly
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    app.state.db = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.session_store = original_store
    del app.state.db


@pytest.fixture
def login(client):
    """Log the test client in; returns the response."""
    async def _login(username: str = JOHN, password: str = USER_PASSWORD):
        return await client.post(
            "/api/sessions", json={"username": username, "password": password},
        )
    return _login
