"""Database Session Manager — async engine, request-scoped sessions, SQLAlchemy error mapping.

Invariants:
    - Every session auto-rolls-back on SQLAlchemy exceptions (no partial commits leak)
    - All SQLAlchemy exceptions mapped to DatabaseError via to_database_error()
    - Non-database exceptions pass through the session context untouched

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - expire_on_commit=False: prevents lazy-load issues in async context
    - Pool sizing only applied to server databases; SQLite (tests, local dev)
      keeps SQLAlchemy's default pool
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from dashboard.core.errors import DatabaseError

logger = logging.getLogger(__name__)

# Most specific first: IntegrityError/OperationalError are DBAPIError subclasses
_ERROR_MESSAGES: tuple[tuple[type[SQLAlchemyError], str], ...] = (
    (IntegrityError, "Integrity constraint violated"),
    (OperationalError, "Connection or operational error"),
    (DBAPIError, "Database driver error"),
    (SQLAlchemyError, "Database operation failed"),
)


def to_database_error(exc: SQLAlchemyError, operation: str) -> DatabaseError:
    """Map a SQLAlchemy exception to the user-safe DatabaseError."""
    for exc_type, message in _ERROR_MESSAGES:
        if isinstance(exc, exc_type):
            return DatabaseError(message, operation)
    return DatabaseError("Database operation failed", operation)


class DatabaseSessionManager:
    """Owns the async engine and hands out sessions that roll back on failure."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs: dict = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size, max_overflow=max_overflow, pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on SQLAlchemy errors."""
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"DB error in session: {e}", extra={"error_code": "DATABASE_ERROR"})
            raise to_database_error(e, "session") from e
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


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
