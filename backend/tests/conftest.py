"""
Pytest fixtures for testing.

Tests run against an in-memory SQLite database (aiosqlite). Each test gets a
fresh schema and runs inside a transaction that is rolled back afterwards.
"""
import os

# Settings are validated when the app module is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret-for-babysteps-tests-0123456789")

from collections.abc import AsyncGenerator, Awaitable, Callable  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncConnection,
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from core.config import Settings, get_settings  # noqa: E402
from core.passwords import hash_password  # noqa: E402
from core.tokens import create_token  # noqa: E402
from db.session import Database  # noqa: E402
from models.user import User  # noqa: E402
from services import user_service  # noqa: E402

TEST_JWT_SECRET = "test-secret-for-babysteps-tests-0123456789"
TEST_PASSWORD = "correct-horse"


def make_settings(**overrides: object) -> Settings:
    """Settings for tests: SQLite, fixed secret, cheap bcrypt."""
    values: dict[str, object] = {
        "database_url": "sqlite+aiosqlite://",
        "JWT_SECRET": TEST_JWT_SECRET,
        "BCRYPT_ROUNDS": 4,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def _enable_sqlite_savepoints(engine: AsyncEngine) -> None:
    """
    Let SQLAlchemy own BEGIN so SAVEPOINTs work with the sqlite driver.

    Also turns on foreign key enforcement, which SQLite leaves off by default.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, _connection_record) -> None:  # noqa: ANN001
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn) -> None:  # noqa: ANN001
        conn.exec_driver_sql("BEGIN")


@pytest.fixture
def settings() -> Settings:
    """Settings used by the app under test."""
    return make_settings()


@pytest.fixture
async def database() -> AsyncGenerator[Database]:
    """A single-connection in-memory database with the full schema."""
    db = Database("sqlite+aiosqlite://", poolclass=StaticPool)
    _enable_sqlite_savepoints(db.engine)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
async def db_connection(database: Database) -> AsyncGenerator[AsyncConnection]:
    """
    Create a connection with a transaction that will be rolled back after the test.

    This provides test isolation - each test runs in its own transaction
    that is rolled back, so tests don't affect each other.
    """
    async with database.engine.connect() as connection:
        transaction = await connection.begin()
        try:
            yield connection
        finally:
            await transaction.rollback()


@pytest.fixture
async def db_session(db_connection: AsyncConnection) -> AsyncGenerator[AsyncSession]:
    """
    Create an async session bound to the test transaction.

    Uses savepoints so the session's flush/commit work within the outer test
    transaction.
    """
    session_factory = async_sessionmaker(
        bind=db_connection,
        class_=AsyncSession,
        expire_on_commit=False,
        join_transaction_mode="create_savepoint",
    )

    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(
    db_session: AsyncSession,
    database: Database,
    settings: Settings,
) -> AsyncGenerator[AsyncClient]:
    """Create a test client with database session and settings overrides."""
    get_settings.cache_clear()

    from api.main import app  # noqa: PLC0415
    from db.session import get_async_session  # noqa: PLC0415

    async def override_get_async_session() -> AsyncGenerator[AsyncSession]:
        yield db_session

    app.state.database = database
    app.dependency_overrides[get_async_session] = override_get_async_session
    app.dependency_overrides[get_settings] = lambda: settings

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    app.state.database = None


@pytest.fixture
def make_user(db_session: AsyncSession) -> Callable[..., Awaitable[User]]:
    """Factory that creates local password accounts directly in the database."""

    async def _make_user(
        email: str,
        password: str = TEST_PASSWORD,
        name: str | None = None,
    ) -> User:
        return await user_service.create_user(
            db_session, email, hash_password(password, rounds=4), name=name,
        )

    return _make_user


@pytest.fixture
async def test_user(make_user: Callable[..., Awaitable[User]]) -> User:
    """Create a test user (password: TEST_PASSWORD)."""
    return await make_user("parent@example.com", name="Parent")


@pytest.fixture
async def other_user(make_user: Callable[..., Awaitable[User]]) -> User:
    """Create another test user for isolation tests."""
    return await make_user("other@example.com", name="Other")


@pytest.fixture
def auth_headers(test_user: User, settings: Settings) -> dict[str, str]:
    """Bearer header for test_user."""
    return {"Authorization": f"Bearer {create_token(test_user.id, settings)}"}


@pytest.fixture
def other_headers(other_user: User, settings: Settings) -> dict[str, str]:
    """Bearer header for other_user."""
    return {"Authorization": f"Bearer {create_token(other_user.id, settings)}"}
