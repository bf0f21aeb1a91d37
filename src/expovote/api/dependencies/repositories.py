"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.expovote.api.dependencies.db import DBSession
from src.expovote.repositories import ProjectRepository, VoteRepository


def get_project_repository(session: DBSession) -> ProjectRepository:
    return ProjectRepository(session)


def get_vote_repository(session: DBSession) -> VoteRepository:
    return VoteRepository(session)


ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
VoteRepo = Annotated[VoteRepository, Depends(get_vote_repository)]
