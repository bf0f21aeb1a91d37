"""Database engine management."""

from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from src.expovote.core.config import Settings, get_settings

_engine: AsyncEngine | None = None


def _get_connect_args(url: str, settings: Settings) -> dict[str, Any]:
    """Driver-level timeouts so no database call blocks indefinitely."""
    if url.startswith("sqlite"):
        # sqlite3 "timeout" is how long a locked database is waited on
        return {"timeout": settings.database_command_timeout}
    if "+asyncpg" in url:
        return {
            "timeout": settings.database_connect_timeout,
            "command_timeout": settings.database_command_timeout,
        }
    return {}


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    """SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine_from_url(url: str, settings: Settings | None = None) -> AsyncEngine:
    """Build an async engine for any supported backend.

    The backend is chosen by the URL alone: ``postgresql+asyncpg://...`` or
    ``sqlite+aiosqlite:///path.db``.
    """
    if settings is None:
        settings = get_settings()

    kwargs: dict[str, Any] = {
        "pool_pre_ping": True,
        "connect_args": _get_connect_args(url, settings),
    }
    if not url.startswith("sqlite"):
        kwargs["pool_size"] = settings.database_pool_size
        kwargs["max_overflow"] = settings.database_max_overflow
        kwargs["pool_timeout"] = settings.database_connect_timeout

    engine = create_async_engine(url, **kwargs)
    if url.startswith("sqlite"):
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def get_engine() -> AsyncEngine:
    """Get or create the database engine singleton."""
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = create_engine_from_url(settings.database_url, settings)
    return _engine


async def dispose_engine() -> None:
    """Dispose the database engine. Call during shutdown."""
    global _engine
    if _engine is not None:
        await _engine.dispose()
        _engine = None
