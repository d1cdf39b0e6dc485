"""
Async SQLAlchemy engine and session lifecycle.

The engine is owned by a ``Database`` object created once at application
startup and disposed at shutdown. It is stored on ``app.state`` and reached
through request dependencies; nothing here creates a connection at import
time.
"""
from collections.abc import AsyncGenerator
from typing import Any

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from core.config import Settings
from models import Base


class Database:
    """Holds the async engine (connection pool) and its session factory."""

    def __init__(self, url: str, **engine_kwargs: Any) -> None:
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, echo=False, **engine_kwargs)
        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Create the database from application settings."""
        if settings.is_sqlite:
            return cls(settings.database_url)
        return cls(
            settings.database_url,
            pool_pre_ping=True,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
        )

    @property
    def dialect(self) -> str:
        """Name of the SQL dialect behind the engine (``postgresql``, ``sqlite``)."""
        return self.engine.dialect.name

    async def create_all(self) -> None:
        """Create all tables (local development and tests; production uses Alembic)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()


def get_database(request: Request) -> Database:
    """Return the Database attached to the running application."""
    return request.app.state.database


async def get_async_session(request: Request) -> AsyncGenerator[AsyncSession]:
    """
    Yield an async database session.

    Uses unit-of-work pattern: services use flush() for refreshing objects,
    commit happens once here at request end. If anything fails, all changes
    are rolled back.
    """
    database = get_database(request)
    async with database.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
