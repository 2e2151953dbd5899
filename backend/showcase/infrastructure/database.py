"""Database Session Manager — one async engine for both collections, with error mapping.

Invariants:
    - Every session rolls back on a SQLAlchemy failure before the error leaves this module
    - Failures surface as DatabaseError whose context names the operation and, when the
      failing statement touched a collection table, the collection (blogpost / project)
    - Engine sizing comes from Settings; nothing here reads the environment directly

Design Decisions:
    - Singleton db_manager initialized from the FastAPI lifespan, disposed on shutdown
    - expire_on_commit=False: rows returned by save() stay readable after commit
    - Error mapping is a first-match table ordered most-specific first
"""

import logging
import re
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from showcase.config import Settings
from showcase.core.domain_types import ResourceKind
from showcase.core.errors import DatabaseError, ErrorContext
from showcase.models.blog_post import BlogPost
from showcase.models.project import Project

logger = logging.getLogger(__name__)

_TABLE_RESOURCES: dict[str, ResourceKind] = {
    BlogPost.__tablename__: ResourceKind.BLOG_POST,
    Project.__tablename__: ResourceKind.PROJECT,
}

# (exception type, operation, client-facing message)
_ERROR_MAP: tuple[tuple[type[SQLAlchemyError], str, str], ...] = (
    (IntegrityError, "commit", "Integrity constraint violated"),
    (OperationalError, "execute", "Connection or operational error"),
    (DBAPIError, "query", "Database driver error"),
    (SQLAlchemyError, "unknown", "Database operation failed"),
)


def _resource_of(exc: SQLAlchemyError) -> str | None:
    """Collection touched by the failing statement, if it names one of ours."""
    statement = getattr(exc, "statement", None) or ""
    for table, kind in _TABLE_RESOURCES.items():
        if re.search(rf"\b{table}\b", statement):
            return kind.value
    return None


def to_database_error(exc: SQLAlchemyError) -> DatabaseError:
    """Map a SQLAlchemy exception onto DatabaseError, keeping driver detail out."""
    for exc_type, operation, message in _ERROR_MAP:
        if isinstance(exc, exc_type):
            break
    return DatabaseError(
        message, operation, ErrorContext(resource=_resource_of(exc)),
    )


class DatabaseSessionManager:
    """Owns the engine and hands out sessions that translate store failures."""

    def __init__(self, settings: Settings):
        self.engine = create_async_engine(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            pool_pre_ping=True,
        )
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            error = to_database_error(e)
            logger.error(
                f"DB {error.operation} failed: {e}",
                extra={
                    "error_code": error.code,
                    "resource": error.context.resource,
                },
            )
            raise error from e
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Readiness: True when a trivial query round-trips."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.engine.dispose()


db_manager: DatabaseSessionManager | None = None


def init_db(settings: Settings) -> None:
    global db_manager
    db_manager = DatabaseSessionManager(settings)
    logger.info("Database engine initialized")


async def close_db() -> None:
    global db_manager
    if db_manager is not None:
        await db_manager.close()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
