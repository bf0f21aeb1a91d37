"""Idempotent schema creation at startup."""

import asyncio

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlmodel import SQLModel

from src.expovote.core.logging import get_logger

# Register tables on SQLModel.metadata
from src.expovote.models import Project, Vote  # noqa: F401

logger = get_logger(__name__)


async def init_schema(engine: AsyncEngine) -> None:
    """Create tables and indexes that do not exist yet."""
    async with engine.begin() as connection:
        await connection.run_sync(SQLModel.metadata.create_all, checkfirst=True)


async def bootstrap_schema(engine: AsyncEngine, max_attempts: int, retry_delay: float) -> bool:
    """Try to initialize the schema, waiting a fixed delay between failed attempts.

    Failures are logged and never raised: the application keeps serving and
    /health reports the database state.

    Returns:
        True if the schema was initialized, False if every attempt failed.
    """
    for attempt in range(1, max_attempts + 1):
        try:
            await init_schema(engine)
        except (SQLAlchemyError, OSError, TimeoutError) as e:
            logger.warning(
                "Schema initialization failed",
                attempt=attempt,
                max_attempts=max_attempts,
                error=str(e),
            )
            if attempt < max_attempts:
                await asyncio.sleep(retry_delay)
            continue
        logger.info("Database schema ready", attempt=attempt)
        return True

    logger.error("Giving up on schema initialization", max_attempts=max_attempts)
    return False
