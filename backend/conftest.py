"""Global pytest fixtures for testing."""

import contextlib
import os
import uuid
from collections.abc import AsyncGenerator

import dotenv
import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

with contextlib.suppress(OSError):
    dotenv.load_dotenv()

# Settings are read at import time, so these must exist before chirpy_api is imported
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-key" + "0" * 32)
os.environ.setdefault("POLKA_KEY", "f271c81ff7084ee5b99a5091b42d486e")

from chirpy_api.config import settings  # noqa: E402
from chirpy_api.main import create_app  # noqa: E402
from chirpy_core.auth import create_access_token  # noqa: E402
from chirpy_database import Base  # noqa: E402
from chirpy_database.models import User  # noqa: E402
from chirpy_database.session import enable_sqlite_foreign_keys, get_session  # noqa: E402

# Optional external test database; defaults to a throwaway SQLite file per test
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL")

# Safety check: ensure tests only run on a test database
if TEST_DATABASE_URL and "_test" not in TEST_DATABASE_URL and "/test" not in TEST_DATABASE_URL:
    raise RuntimeError(
        f"Safety check failed: TEST_DATABASE_URL must point to a test database "
        f"(name should contain 'test'). Current: {TEST_DATABASE_URL}"
    )

TEST_PASSWORD = "TestPass123"


@pytest_asyncio.fixture
async def test_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """Create test database engine with a fresh schema."""
    url = TEST_DATABASE_URL or f"sqlite+aiosqlite:///{tmp_path / 'chirpy_test.db'}"
    engine = create_async_engine(
        url,
        echo=False,
        poolclass=NullPool,  # Disable connection pooling for tests
    )
    if engine.dialect.name == "sqlite":
        enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for one test."""
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture
def app() -> FastAPI:
    """Create an isolated application instance."""
    return create_app()


@pytest_asyncio.fixture
async def client(app: FastAPI, db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client with the database session overridden."""

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def jwt_secret() -> str:
    """The secret the application signs access tokens with."""
    return settings.jwt_secret.get_secret_value()


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession) -> User:
    """Create a test user."""
    from chirpy_core.schemas import UserCreate
    from chirpy_core.services import UserService

    service = UserService(db_session)
    return await service.create_user(UserCreate(email="test@example.com", password=TEST_PASSWORD))


@pytest_asyncio.fixture
async def other_user(db_session: AsyncSession) -> User:
    """Create a second user for ownership checks."""
    from chirpy_core.schemas import UserCreate
    from chirpy_core.services import UserService

    service = UserService(db_session)
    return await service.create_user(UserCreate(email="other@example.com", password=TEST_PASSWORD))


@pytest.fixture
def auth_headers(test_user: User, jwt_secret: str) -> dict[str, str]:
    """Generate auth headers for test user."""
    access_token = create_access_token(uuid.UUID(test_user.id), jwt_secret)
    return {"Authorization": f"Bearer {access_token}"}


@pytest.fixture
def other_auth_headers(other_user: User, jwt_secret: str) -> dict[str, str]:
    """Generate auth headers for the second user."""
    access_token = create_access_token(uuid.UUID(other_user.id), jwt_secret)
    return {"Authorization": f"Bearer {access_token}"}
