"""Vote model - one row per (project, voter)."""

from datetime import datetime

from sqlalchemy import Column, ForeignKey, Index, Integer, UniqueConstraint
from sqlmodel import Field, SQLModel

from src.expovote.models.base import utc_now

VOTER_ID_LENGTH = 64


class Vote(SQLModel, table=True):
    """A single vote.

    The unique constraint on (project_id, voter_id) is what actually prevents
    double voting; the lookup done before inserting only avoids a failed write
    in the common case.
    """

    __tablename__ = "votes"
    __table_args__ = (
        UniqueConstraint("project_id", "voter_id", name="uq_votes_project_voter"),
        Index("idx_votes_voter_project", "voter_id", "project_id"),
        {"sqlite_autoincrement": True},
    )

    id: int | None = Field(default=None, primary_key=True)
    project_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("projects.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
    )
    voter_id: str = Field(max_length=VOTER_ID_LENGTH)
    cast_at: datetime = Field(default_factory=utc_now)
