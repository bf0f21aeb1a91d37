"""Root test fixtures shared across all test types.

Database-specific fixtures are in tests/integration/conftest.py.
"""

import os

# Set APP_ENV to testing before any app imports to disable rate limiting
os.environ.setdefault("APP_ENV", "testing")
# Integration tests build their own engines; never touch a real database file
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
# Tests create the schema explicitly
os.environ.setdefault("DATABASE_AUTO_CREATE_SCHEMA", "false")

# ruff: noqa: E402 - Imports must be after env var setup
from src.expovote.core.config import get_settings

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()
