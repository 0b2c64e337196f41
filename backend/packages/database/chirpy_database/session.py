"""
Database session management.

Provides the async engine, session factory, and FastAPI session dependency.
"""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """
    Turn on foreign key enforcement for every SQLite connection.

    SQLite ignores ON DELETE CASCADE unless the pragma is set per connection.

    Args:
        engine: Async engine bound to a SQLite database.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection: Any, _connection_record: Any) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def init_database(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Initialize the global engine and session factory.

    Args:
        database_url: SQLAlchemy async database URL.
        echo: Whether to log SQL statements.

    Returns:
        The created engine.
    """
    global _engine, _session_factory

    _engine = create_async_engine(database_url, echo=echo, pool_pre_ping=True)
    if _engine.dialect.name == "sqlite":
        enable_sqlite_foreign_keys(_engine)

    _session_factory = async_sessionmaker(
        bind=_engine, class_=AsyncSession, expire_on_commit=False
    )
    return _engine


async def close_database() -> None:
    """Dispose of the global engine."""
    global _engine, _session_factory

    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None


def _get_factory() -> async_sessionmaker[AsyncSession]:
    if _session_factory is None:
        raise RuntimeError("Database not initialized")
    return _session_factory


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding a database session.

    Yields:
        Async database session, rolled back on error.
    """
    async with _get_factory()() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
