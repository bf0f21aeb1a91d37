"""Vote tallies and the final report."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.expovote.core.db.session import storage_guard
from src.expovote.models import Project, ResultOrder
from src.expovote.models.base import utc_now
from src.expovote.repositories import ProjectRepository
from src.expovote.schemas import ProjectTally, Report


def _tally(project: Project, votes: int) -> ProjectTally:
    return ProjectTally(
        id=project.id,  # type: ignore[arg-type]
        name=project.name,
        created_at=project.created_at,
        votes=votes,
    )


class ReportService:
    """Reporting workflow - read-only aggregation."""

    def __init__(self, project_repo: ProjectRepository, session: AsyncSession):
        self.project_repo = project_repo
        self.session = session

    async def aggregate_results(self, order: ResultOrder = ResultOrder.VOTES) -> list[ProjectTally]:
        """Vote count for every project, zero-vote projects included."""
        async with storage_guard(self.session):
            rows = await self.project_repo.list_with_vote_counts(order)
        return [_tally(project, votes) for project, votes in rows]

    async def build_report(self) -> Report:
        """All tallies (most voted first), the total, and the leading project.

        The leader is the first project with at least one vote; ties on count
        resolve to the alphabetically first name. No votes at all means no leader.
        """
        tallies = await self.aggregate_results(ResultOrder.VOTES)
        leader = next((tally for tally in tallies if tally.votes > 0), None)
        return Report(
            tallies=tallies,
            total_votes=sum(tally.votes for tally in tallies),
            leader=leader,
            generated_at=utc_now(),
        )
