"""Tests for application startup and shutdown."""

import asyncio
from collections.abc import Callable
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, inspect

import src.expovote.core.db.engine as engine_module
from src.expovote.main import create_app
from tests.integration.conftest import sqlite_url

pytestmark = pytest.mark.integration


@pytest.fixture(autouse=True)
def fresh_engine(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start without an engine singleton so the lifespan builds one from settings."""
    monkeypatch.setattr(engine_module, "_engine", None)


def table_names(db_path: Path) -> set[str]:
    sync_engine = create_engine(f"sqlite:///{db_path}")
    try:
        return set(inspect(sync_engine).get_table_names())
    finally:
        sync_engine.dispose()


def test_startup_creates_schema_and_shutdown_disposes_engine(
    tmp_path: Path, settings_env: Callable[..., None]
):
    db_path = tmp_path / "lifecycle.db"
    settings_env(database_url=sqlite_url(db_path), database_auto_create_schema="true")
    app = create_app()

    with TestClient(app) as client:
        created = client.portal.call(asyncio.wait_for, app.state.schema_task, 10)
        assert created is True
        assert engine_module._engine is not None

        response = client.get("/health")
        assert response.status_code == 200

    assert {"projects", "votes"} <= table_names(db_path)
    assert engine_module._engine is None


def test_shutdown_cancels_pending_schema_bootstrap(
    tmp_path: Path, settings_env: Callable[..., None]
):
    settings_env(
        database_url=sqlite_url(tmp_path / "missing" / "lifecycle.db"),
        database_auto_create_schema="true",
        schema_init_retry_delay="60",
    )
    app = create_app()

    with TestClient(app):
        task = app.state.schema_task
        assert not task.done()

    assert task.cancelled()
    assert engine_module._engine is None


def test_no_bootstrap_when_auto_create_disabled(
    tmp_path: Path, settings_env: Callable[..., None]
):
    db_path = tmp_path / "untouched.db"
    settings_env(database_url=sqlite_url(db_path), database_auto_create_schema="false")
    app = create_app()

    with TestClient(app):
        assert app.state.schema_task is None

    assert "projects" not in table_names(db_path)
