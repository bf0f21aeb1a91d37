"""Database session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.exc import (
    DBAPIError,
    IntegrityError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
)
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from src.expovote.core.db.engine import get_engine
from src.expovote.core.exceptions import ConstraintViolation, StorageError, StorageUnavailable
from src.expovote.core.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def get_session(engine: AsyncEngine | None = None) -> AsyncGenerator[AsyncSession]:
    """Create a database session.

    Args:
        engine: Optional engine override for testing.
    """
    if engine is None:
        engine = get_engine()

    session_factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with session_factory() as session:
        yield session


def translate_storage_error(exc: SQLAlchemyError) -> StorageError:
    """Map a SQLAlchemy failure onto the storage error taxonomy."""
    if isinstance(exc, IntegrityError):
        return ConstraintViolation(str(exc.orig))
    if isinstance(exc, OperationalError | InterfaceError | PoolTimeoutError):
        return StorageUnavailable(str(exc))
    if isinstance(exc, DBAPIError) and exc.connection_invalidated:
        return StorageUnavailable(str(exc))
    return StorageError(str(exc))


@asynccontextmanager
async def storage_guard(session: AsyncSession) -> AsyncGenerator[AsyncSession]:
    """Run a unit of work, rolling back and translating database failures.

    IntegrityError is re-raised untouched so callers can interpret it
    (for example as a duplicate vote) before falling back to ConstraintViolation.
    """
    try:
        yield session
    except IntegrityError:
        await session.rollback()
        raise
    except (SQLAlchemyError, OSError, TimeoutError) as e:
        logger.error("Database operation failed", error=str(e), error_type=type(e).__name__)
        await _safe_rollback(session)
        if isinstance(e, SQLAlchemyError):
            raise translate_storage_error(e) from e
        raise StorageUnavailable(str(e)) from e


async def _safe_rollback(session: AsyncSession) -> None:
    try:
        await session.rollback()
    except (SQLAlchemyError, OSError) as e:
        # The connection is already gone; the original error is what matters
        logger.warning("Rollback after database failure also failed", error=str(e))
