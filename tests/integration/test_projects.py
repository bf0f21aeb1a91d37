"""Tests for project registration, lookup and deletion."""

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.expovote.core.exceptions import ProjectNotFound, ValidationError
from src.expovote.models import Project, Vote
from src.expovote.repositories import ProjectRepository
from src.expovote.services import ProjectService
from tests.helpers import create_project, create_votes

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


async def count_rows(session: AsyncSession, model: type) -> int:
    result = await session.execute(select(func.count()).select_from(model))
    return result.scalar_one()


async def test_register_assigns_increasing_ids(project_service: ProjectService):
    first = await project_service.register("Robot Arm")
    second = await project_service.register("Estufa Automatizada")

    assert first.id == 1
    assert second.id == 2
    assert first.created_at is not None


async def test_register_strips_name(project_service: ProjectService):
    project = await project_service.register("  Robot Arm  ")
    assert project.name == "Robot Arm"


@pytest.mark.parametrize("name", ["", "   ", "x" * 256])
async def test_register_rejects_invalid_names(
    project_service: ProjectService, db_session: AsyncSession, name: str
):
    with pytest.raises(ValidationError):
        await project_service.register(name)

    assert await count_rows(db_session, Project) == 0


async def test_get_project_not_found(project_service: ProjectService):
    with pytest.raises(ProjectNotFound) as exc_info:
        await project_service.get_project(999)
    assert exc_info.value.project_id == 999


async def test_list_projects_in_registration_order(project_service: ProjectService):
    await project_service.register("Zeta")
    await project_service.register("Alpha")

    projects = await project_service.list_projects()

    assert [p.name for p in projects] == ["Zeta", "Alpha"]


async def test_delete_cascades_votes(project_service: ProjectService, db_session: AsyncSession):
    doomed = await create_project(db_session)
    survivor = await create_project(db_session)
    await create_votes(db_session, doomed, 3)
    await create_votes(db_session, survivor, 2)

    assert await project_service.delete(doomed.id) is True

    assert await project_service.count_votes(doomed.id) == 0
    assert await project_service.count_votes(survivor.id) == 2
    assert await count_rows(db_session, Vote) == 2
    assert doomed.id not in [p.id for p in await project_service.list_projects()]


async def test_delete_unknown_project_is_noop(project_service: ProjectService):
    assert await project_service.delete(12345) is False


async def test_ids_not_reused_after_delete(project_service: ProjectService):
    first = await project_service.register("Primeiro")
    await project_service.delete(first.id)

    second = await project_service.register("Segundo")

    assert second.id > first.id


async def test_count_votes_matches_rows(db_session: AsyncSession, project_service: ProjectService):
    project = await create_project(db_session)
    await create_votes(db_session, project, 4)

    assert await project_service.count_votes(project.id) == 4


async def test_repository_create_does_not_commit(db_session: AsyncSession):
    repo = ProjectRepository(db_session)
    await repo.create("Rascunho")
    await db_session.rollback()

    assert await count_rows(db_session, Project) == 0
