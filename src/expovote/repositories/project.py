"""Repository for Project entity."""

from sqlalchemy import delete, func
from sqlmodel import select

from src.expovote.models import Project, ResultOrder, Vote
from src.expovote.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project entity."""

    model = Project

    async def list_all(self) -> list[Project]:
        """List all projects in registration order."""
        result = await self.session.execute(select(Project).order_by(Project.id))
        return list(result.scalars().all())

    async def list_with_vote_counts(
        self, order: ResultOrder = ResultOrder.VOTES
    ) -> list[tuple[Project, int]]:
        """List every project with its vote count, including projects with no votes.

        Args:
            order: VOTES sorts by count descending, then name; NAME sorts by name.

        Returns:
            List of (project, vote_count) pairs
        """
        vote_count = func.count(Vote.id).label("vote_count")
        query = (
            select(Project, vote_count)
            .outerjoin(Vote, Vote.project_id == Project.id)  # type: ignore[arg-type]
            .group_by(Project.id)  # type: ignore[arg-type]
        )
        if order == ResultOrder.VOTES:
            query = query.order_by(vote_count.desc(), Project.name, Project.id)
        else:
            query = query.order_by(Project.name, Project.id)

        result = await self.session.execute(query)
        return [(project, count) for project, count in result.all()]

    async def create(self, name: str) -> Project:
        """Insert a project and flush so its id is assigned."""
        project = Project(name=name)
        self.add(project)
        await self.session.flush()
        return project

    async def delete_by_id(self, project_id: int) -> bool:
        """Delete a project; its votes go with it through ON DELETE CASCADE.

        Returns:
            True if a row was deleted
        """
        statement = delete(Project).where(Project.id == project_id)  # type: ignore[arg-type]
        result = await self.session.execute(statement)
        return result.rowcount > 0
