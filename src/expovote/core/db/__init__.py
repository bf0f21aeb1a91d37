"""Database utilities - engine, session, schema bootstrap, migrations."""

from src.expovote.core.db.bootstrap import bootstrap_schema, init_schema
from src.expovote.core.db.engine import create_engine_from_url, dispose_engine, get_engine
from src.expovote.core.db.migrations import run_migrations_async, run_migrations_sync
from src.expovote.core.db.session import get_session, storage_guard, translate_storage_error

__all__ = [
    # Engine
    "create_engine_from_url",
    "dispose_engine",
    "get_engine",
    # Session
    "get_session",
    "storage_guard",
    "translate_storage_error",
    # Schema
    "bootstrap_schema",
    "init_schema",
    "run_migrations_async",
    "run_migrations_sync",
]
