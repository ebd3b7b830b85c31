"""Service test fixtures — async DB + FastAPI test client with a fixed clock.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB sessions
    - get_clock overridden with a FixedClock the test can move
    - Workspace timezone pinned to UTC unless a test overrides settings

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (FOR UPDATE is not rendered on SQLite; the in-process category/task locks
      still apply)
    - Assertions read plain columns (select(Note.id, Note.position)) so identity-map
      caching in test_db never hides what the request committed
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from taskboard.config import Settings, get_settings
from taskboard.db.base import Base
from taskboard.infrastructure.clock import get_clock
from taskboard.infrastructure.database import get_db
from taskboard.models import Category, Note, Task
from taskboard.main import app


class FixedClock:
    """Clock frozen at a settable instant."""

    def __init__(self, instant: datetime):
        self.instant = instant

    def now(self) -> datetime:
        return self.instant


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
def clock():
    """Monday 2024-01-01 08:00 UTC."""
    return FixedClock(datetime(2024, 1, 1, 8, 0, tzinfo=timezone.utc))


@pytest.fixture
def settings():
    return Settings(workspace_timezone="UTC")


@pytest.fixture
async def client(test_session_factory, clock, settings):
    """FastAPI test client with DB, clock and settings overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock
    app.dependency_overrides[get_settings] = lambda: settings

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def user_id():
    return uuid4()


@pytest.fixture
def auth(user_id):
    """Identity header for the default user."""
    return {"X-User-Id": str(user_id)}


@pytest.fixture
async def category(test_db, user_id):
    record = Category(user_id=user_id, name="Work")
    test_db.add(record)
    await test_db.commit()
    await test_db.refresh(record)
    return record


@pytest.fixture
async def make_notes(test_db):
    """Insert count notes at positions 0..count-1; returns them in position order."""
    async def _make(category_id, count):
        notes = [
            Note(category_id=category_id, name=f"Note {i}", content="body", position=i)
            for i in range(count)
        ]
        test_db.add_all(notes)
        await test_db.commit()
        return notes
    return _make


@pytest.fixture
async def make_task(test_db, category, user_id):
    """Insert a task owned by the default user in the default category."""
    async def _make(**fields):
        task = Task(
            user_id=fields.pop("user_id", user_id),
            category_id=fields.pop("category_id", category.id),
            name=fields.pop("name", "Water plants"),
            **fields,
        )
        test_db.add(task)
        await test_db.commit()
        return task
    return _make


@pytest.fixture
def read_positions(test_db):
    """Committed {note_id: position} for one category."""
    async def _read(category_id):
        result = await test_db.execute(
            select(Note.id, Note.position).where(Note.category_id == category_id),
        )
        return {row.id: row.position for row in result.all()}
    return _read


@pytest.fixture
def read_task(test_db):
    """Committed (status, due) for one task; due normalized to aware UTC."""
    async def _read(task_id):
        result = await test_db.execute(
            select(Task.status, Task.due).where(Task.id == task_id),
        )
        row = result.one()
        due = row.due
        if due is not None and due.tzinfo is None:
            due = due.replace(tzinfo=timezone.utc)
        return row.status, due
    return _read
