"""Vote casting with one vote per voter per project."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.expovote.core.db.session import storage_guard, translate_storage_error
from src.expovote.core.exceptions import DuplicateVote, ProjectNotFound
from src.expovote.core.logging import get_logger
from src.expovote.models import Vote
from src.expovote.repositories import ProjectRepository, VoteRepository

logger = get_logger(__name__)


class VotingService:
    """Voting workflow - business logic only."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        vote_repo: VoteRepository,
        session: AsyncSession,
    ):
        self.project_repo = project_repo
        self.vote_repo = vote_repo
        self.session = session

    async def cast_vote(self, project_id: int, voter_id: str) -> Vote:
        """Record a vote.

        The lookup before inserting is only a fast path. Two concurrent requests
        from the same voter can both pass it; the unique constraint on
        (project_id, voter_id) then rejects the second insert, and that rejection
        is reported as DuplicateVote as well.

        Raises:
            ProjectNotFound: If the project does not exist (or vanished meanwhile)
            DuplicateVote: If this voter already voted for the project
        """
        async with storage_guard(self.session):
            project = await self.project_repo.get_by_id(project_id)
            if project is None:
                raise ProjectNotFound(project_id)

            existing = await self.vote_repo.find(project_id, voter_id)
            if existing is not None:
                logger.info("Duplicate vote rejected", project_id=project_id)
                raise DuplicateVote(project_id)

        try:
            async with storage_guard(self.session):
                vote = await self.vote_repo.insert(project_id, voter_id)
                await self.session.commit()
        except IntegrityError as e:
            raise await self._explain_integrity_error(project_id, voter_id, e) from e

        logger.info("Vote recorded", project_id=project_id, vote_id=vote.id)
        return vote

    async def _explain_integrity_error(
        self, project_id: int, voter_id: str, error: IntegrityError
    ) -> Exception:
        """Work out which constraint rejected an insert (session already rolled back)."""
        async with storage_guard(self.session):
            if await self.project_repo.get_by_id(project_id) is None:
                logger.info("Project deleted while voting", project_id=project_id)
                return ProjectNotFound(project_id)
            if await self.vote_repo.find(project_id, voter_id) is not None:
                logger.info("Concurrent duplicate vote rejected", project_id=project_id)
                return DuplicateVote(project_id)
        return translate_storage_error(error)

    async def clear_votes(self) -> int:
        """Delete every vote of every project. Returns the number removed."""
        async with storage_guard(self.session):
            removed = await self.vote_repo.delete_all()
            await self.session.commit()
        logger.info("All votes cleared", removed=removed)
        return removed
