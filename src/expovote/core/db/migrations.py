"""Alembic migration runner for deployments that manage the schema explicitly."""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from alembic.config import Config

from alembic import command

PROJECT_ROOT = Path(__file__).resolve().parents[4]
SCRIPT_LOCATION = PROJECT_ROOT / "src" / "alembic"


def get_alembic_config() -> Config:
    """Load alembic.ini if present, always pointing at the bundled scripts."""
    ini_path = PROJECT_ROOT / "alembic.ini"
    alembic_cfg = Config(str(ini_path)) if ini_path.exists() else Config()
    alembic_cfg.set_main_option("script_location", str(SCRIPT_LOCATION))
    return alembic_cfg


def run_migrations_sync(revision: str = "head") -> None:
    """Run Alembic migrations synchronously against DATABASE_URL."""
    command.upgrade(get_alembic_config(), revision)


async def run_migrations_async(revision: str = "head") -> None:
    """Run Alembic migrations from async context.

    Uses ThreadPoolExecutor to avoid event loop conflicts with Alembic.
    """
    loop = asyncio.get_running_loop()
    with ThreadPoolExecutor() as pool:
        await loop.run_in_executor(pool, run_migrations_sync, revision)
