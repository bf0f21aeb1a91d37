"""Project registration and removal."""

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.expovote.core.db.session import storage_guard, translate_storage_error
from src.expovote.core.exceptions import ProjectNotFound, ValidationError
from src.expovote.core.logging import get_logger
from src.expovote.models import Project
from src.expovote.repositories import ProjectRepository, VoteRepository
from src.expovote.schemas import ProjectCreate

logger = get_logger(__name__)


class ProjectService:
    """Project management service - business logic only."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        vote_repo: VoteRepository,
        session: AsyncSession,
    ):
        self.project_repo = project_repo
        self.vote_repo = vote_repo
        self.session = session

    async def list_projects(self) -> list[Project]:
        async with storage_guard(self.session):
            return await self.project_repo.list_all()

    async def get_project(self, project_id: int) -> Project:
        """Get a project or raise ProjectNotFound."""
        async with storage_guard(self.session):
            project = await self.project_repo.get_by_id(project_id)
        if project is None:
            raise ProjectNotFound(project_id)
        return project

    async def register(self, name: str) -> Project:
        """Register a new project.

        Raises:
            ValidationError: If the name is blank or too long
        """
        try:
            data = ProjectCreate(name=name)
        except PydanticValidationError as e:
            raise ValidationError("Informe um nome de projeto válido.") from e

        try:
            async with storage_guard(self.session):
                project = await self.project_repo.create(data.name)
                await self.session.commit()
        except IntegrityError as e:
            raise translate_storage_error(e) from e

        logger.info("Project registered", project_id=project.id, project_name=project.name)
        return project

    async def delete(self, project_id: int) -> bool:
        """Delete a project and, by cascade, all of its votes.

        Deleting a project that does not exist is a no-op.

        Returns:
            True if the project existed
        """
        try:
            async with storage_guard(self.session):
                deleted = await self.project_repo.delete_by_id(project_id)
                await self.session.commit()
        except IntegrityError as e:
            raise translate_storage_error(e) from e

        if deleted:
            logger.info("Project deleted", project_id=project_id)
        else:
            logger.warning("Delete requested for unknown project", project_id=project_id)
        return deleted

    async def count_votes(self, project_id: int) -> int:
        async with storage_guard(self.session):
            return await self.vote_repo.count_by_project(project_id)
