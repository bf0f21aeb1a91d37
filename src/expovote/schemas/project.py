"""Project schemas for form input and page rendering."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from src.expovote.models import MAX_PROJECT_NAME_LENGTH


class ProjectCreate(BaseModel):
    """Schema for registering a project."""

    name: str = Field(min_length=1, max_length=MAX_PROJECT_NAME_LENGTH)

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: object) -> object:
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("Project name cannot be empty or whitespace only")
            if "\x00" in v:
                # PostgreSQL text columns cannot store NUL
                raise ValueError("Project name cannot contain NUL characters")
        return v


class ProjectTally(BaseModel):
    """A project together with its vote count."""

    id: int
    name: str
    created_at: datetime
    votes: int = 0
