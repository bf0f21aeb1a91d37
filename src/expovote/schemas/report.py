"""Final report schema."""

from datetime import datetime

from pydantic import BaseModel, computed_field

from src.expovote.schemas.project import ProjectTally


class Report(BaseModel):
    """Aggregated results for the whole event."""

    tallies: list[ProjectTally]
    total_votes: int
    leader: ProjectTally | None
    generated_at: datetime

    @computed_field  # type: ignore[prop-decorator]
    @property
    def project_count(self) -> int:
        return len(self.tallies)

    def share_of(self, tally: ProjectTally) -> float:
        """Percentage of all votes that went to a project (0 when nobody voted)."""
        if self.total_votes == 0:
            return 0.0
        return round(100 * tally.votes / self.total_votes, 1)
