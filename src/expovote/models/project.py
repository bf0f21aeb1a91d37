"""Project model - an entry that attendees can vote for."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.expovote.models.base import utc_now

MAX_PROJECT_NAME_LENGTH = 255


class Project(SQLModel, table=True):
    """Project registered by the organizers."""

    __tablename__ = "projects"
    # Ids are never reused after deletion (AUTOINCREMENT on SQLite, SERIAL on Postgres)
    __table_args__ = {"sqlite_autoincrement": True}

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=MAX_PROJECT_NAME_LENGTH)
    created_at: datetime = Field(default_factory=utc_now)
