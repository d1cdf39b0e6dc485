"""Tests for the Database lifecycle and the request session dependency."""
from collections.abc import AsyncGenerator
from types import SimpleNamespace

import pytest
from sqlalchemy import func, select
from sqlalchemy.pool import StaticPool

from api.main import app, lifespan
from core.config import Settings
from db.session import Database, get_async_session, get_database
from models.user import User


@pytest.fixture
async def memory_db() -> AsyncGenerator[Database]:
    db = Database("sqlite+aiosqlite://", poolclass=StaticPool)
    await db.create_all()
    yield db
    await db.dispose()


def fake_request(database: Database) -> SimpleNamespace:
    return SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(database=database)))


async def count_users(database: Database) -> int:
    async with database.session_factory() as session:
        return await session.scalar(select(func.count()).select_from(User))


def test_from_settings_sqlite_has_no_pool_sizing(settings: Settings) -> None:
    database = Database.from_settings(settings)
    assert database.url == "sqlite+aiosqlite://"
    assert database.engine.dialect.name == "sqlite"


async def test_get_database_reads_app_state(memory_db: Database) -> None:
    assert get_database(fake_request(memory_db)) is memory_db


async def test_session_commits_at_request_end(memory_db: Database) -> None:
    sessions = get_async_session(fake_request(memory_db))
    session = await anext(sessions)
    session.add(User(open_id="local:commit@example.com"))
    await session.flush()
    with pytest.raises(StopAsyncIteration):
        await anext(sessions)

    assert await count_users(memory_db) == 1


async def test_session_rolls_back_on_error(memory_db: Database) -> None:
    sessions = get_async_session(fake_request(memory_db))
    session = await anext(sessions)
    session.add(User(open_id="local:rollback@example.com"))
    await session.flush()
    with pytest.raises(RuntimeError):
        await sessions.athrow(RuntimeError("handler failed"))

    assert await count_users(memory_db) == 0


async def test_lifespan_creates_and_disposes_database() -> None:
    app.state.database = None
    async with lifespan(app):
        assert isinstance(app.state.database, Database)
    assert app.state.database is None


async def test_lifespan_keeps_injected_database(memory_db: Database) -> None:
    app.state.database = memory_db
    try:
        async with lifespan(app):
            assert app.state.database is memory_db
        assert app.state.database is memory_db
    finally:
        app.state.database = None
