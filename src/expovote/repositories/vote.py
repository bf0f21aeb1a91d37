"""Repository for Vote entity."""

from sqlalchemy import delete, func
from sqlmodel import select

from src.expovote.models import Vote
from src.expovote.repositories.base import BaseRepository


class VoteRepository(BaseRepository[Vote]):
    """Repository for Vote entity."""

    model = Vote

    async def find(self, project_id: int, voter_id: str) -> Vote | None:
        """Get the vote a voter cast for a project, if any."""
        result = await self.session.execute(
            select(Vote).where(Vote.project_id == project_id, Vote.voter_id == voter_id)
        )
        return result.scalar_one_or_none()

    async def insert(self, project_id: int, voter_id: str) -> Vote:
        """Insert a vote and flush so constraint violations surface here."""
        vote = Vote(project_id=project_id, voter_id=voter_id)
        self.add(vote)
        await self.session.flush()
        return vote

    async def count_by_project(self, project_id: int) -> int:
        result = await self.session.execute(
            select(func.count(Vote.id)).where(Vote.project_id == project_id)
        )
        return result.scalar_one()

    async def count_all(self) -> int:
        result = await self.session.execute(select(func.count(Vote.id)))
        return result.scalar_one()

    async def delete_all(self) -> int:
        """Delete every vote. Returns the number of rows removed."""
        result = await self.session.execute(delete(Vote))
        return result.rowcount
