"""Root conftest - shared database and HTTP client fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The app under test gets a DatabaseSessionManager wrapping the test engine
      on app.state (the lifespan is not run by ASGITransport)

Design Decisions:
    - SQLite in-memory: fast, no external dependency; PostgreSQL-specific
      features are not used by the data access layer
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, async_sessionmaker, create_async_engine,
)

import portfolio.models  # noqa: E402,F401
from portfolio.config import Settings  # noqa: E402
from portfolio.db.base import Base  # noqa: E402
from portfolio.infrastructure.database import DatabaseSessionManager  # noqa: E402
from portfolio.main import create_app  # noqa: E402


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
def app(test_engine, test_session_factory):
    application = create_app(Settings(api_prefix="/api"))
    application.state.db = DatabaseSessionManager.from_session_factory(
        test_engine, test_session_factory,
    )
    return application


@pytest.fixture
async def client(app):
    """FastAPI test client backed by the in-memory database."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
