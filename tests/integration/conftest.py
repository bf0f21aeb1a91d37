"""Integration test fixtures for database and HTTP client operations.

Each test gets its own SQLite database file, built through the same engine
factory the application uses (foreign keys and cascades enabled).
"""

from collections.abc import AsyncGenerator, Callable, Generator
from pathlib import Path

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from src.expovote.api.dependencies import get_db_session
from src.expovote.core.config import get_settings
from src.expovote.core.db import create_engine_from_url, get_session, init_schema
from src.expovote.main import create_app
from src.expovote.repositories import ProjectRepository, VoteRepository
from src.expovote.services import ProjectService, ReportService, VotingService


def sqlite_url(path: Path) -> str:
    return f"sqlite+aiosqlite:///{path}"


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine]:
    """Create a test database engine with the schema in place."""
    test_engine = create_engine_from_url(sqlite_url(tmp_path / "votes.db"))
    await init_schema(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for direct database operations.

    Tests must explicitly commit to persist changes.
    """
    async with get_session(engine) as session:
        yield session


def override_session(app: FastAPI, engine: AsyncEngine) -> None:
    """Point every request-scoped session of `app` at `engine`."""

    async def _get_test_session() -> AsyncGenerator[AsyncSession]:
        async with get_session(engine) as session:
            yield session

    app.dependency_overrides[get_db_session] = _get_test_session


@pytest.fixture
def settings_env(monkeypatch: pytest.MonkeyPatch) -> Generator[Callable[..., None]]:
    """Override settings through environment variables for one test.

    Call it before create_app(); the settings cache is cleared both ways.
    """

    def _set(**env: str) -> None:
        for key, value in env.items():
            monkeypatch.setenv(key.upper(), value)
        get_settings.cache_clear()

    yield _set
    get_settings.cache_clear()


@pytest.fixture
def app(engine: AsyncEngine) -> FastAPI:
    application = create_app()
    override_session(application, engine)
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """HTTP client talking to the app in-process."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as http_client:
        yield http_client


# --- Services wired the same way the request dependencies wire them ---


@pytest.fixture
def project_service(db_session: AsyncSession) -> ProjectService:
    return ProjectService(ProjectRepository(db_session), VoteRepository(db_session), db_session)


@pytest.fixture
def voting_service(db_session: AsyncSession) -> VotingService:
    return VotingService(ProjectRepository(db_session), VoteRepository(db_session), db_session)


@pytest.fixture
def report_service(db_session: AsyncSession) -> ReportService:
    return ReportService(ProjectRepository(db_session), db_session)
