"""Database Session Manager - async connection pool, error translation, health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - health_check never raises: any failure reports not-ready
    - All SQLAlchemy exceptions surface as StoreError (core/errors.py)
    - The manager lives on app.state; there is no module-level singleton

Design Decisions:
    - expire_on_commit=False: prevents lazy-load issues in async context
    - translate_store_errors is used by repositories so a failed statement is
      mapped before control returns to the route handler
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from portfolio.core.errors import StoreError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def translate_store_errors(
    session: AsyncSession, operation: str, entity: str,
) -> AsyncGenerator[None, None]:
    """Roll back and raise StoreError for any SQLAlchemy failure."""
    try:
        yield
    except IntegrityError as e:
        await session.rollback()
        logger.error(
            f"DB integrity error during {operation}: {e}",
            extra={"entity": entity, "operation": operation},
        )
        raise StoreError(operation, entity, "violated a constraint") from e
    except OperationalError as e:
        await session.rollback()
        logger.error(
            f"DB operational error during {operation}: {e}",
            extra={"entity": entity, "operation": operation},
        )
        raise StoreError(operation, entity, "lost its connection") from e
    except DBAPIError as e:
        await session.rollback()
        logger.error(
            f"DB driver error during {operation}: {e}",
            extra={"entity": entity, "operation": operation},
        )
        raise StoreError(operation, entity) from e
    except SQLAlchemyError as e:
        await session.rollback()
        logger.error(
            f"SQLAlchemy error during {operation}: {e}",
            extra={"entity": entity, "operation": operation},
        )
        raise StoreError(operation, entity) from e


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 20,
        max_overflow: int = 10,
        echo: bool = False,
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
            echo=echo,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_session_factory(
        cls, engine, session_factory: async_sessionmaker[AsyncSession],
    ) -> "DatabaseSessionManager":
        """Wrap an existing engine (test fixtures, scripts)."""
        manager = cls.__new__(cls)
        manager.engine = engine
        manager._session_factory = session_factory
        return manager

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


def get_db_manager(request: Request) -> DatabaseSessionManager:
    manager = getattr(request.app.state, "db", None)
    if manager is None:
        raise RuntimeError("Database not initialized")
    return manager


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    async with get_db_manager(request).session() as session:
        yield session
