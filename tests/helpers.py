"""Test helper functions for common data creation patterns."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.expovote.models import Project, Vote
from tests.factories import ProjectFactory, VoteFactory


async def create_project(session: AsyncSession, **kwargs) -> Project:
    """Persist a project and return it with its id assigned."""
    project = ProjectFactory.build(**kwargs)
    session.add(project)
    await session.commit()
    await session.refresh(project)
    return project


async def create_votes(session: AsyncSession, project: Project, count: int) -> list[Vote]:
    """Persist `count` votes from distinct voters for a project."""
    votes = [VoteFactory.build(project_id=project.id) for _ in range(count)]
    session.add_all(votes)
    await session.commit()
    return votes
