"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.expovote.api.dependencies.db import DBSession
from src.expovote.api.dependencies.repositories import ProjectRepo, VoteRepo
from src.expovote.services import ProjectService, ReportService, VotingService


def get_project_service(
    project_repo: ProjectRepo,
    vote_repo: VoteRepo,
    session: DBSession,
) -> ProjectService:
    """Get project service."""
    return ProjectService(project_repo, vote_repo, session)


def get_voting_service(
    project_repo: ProjectRepo,
    vote_repo: VoteRepo,
    session: DBSession,
) -> VotingService:
    """Get voting service."""
    return VotingService(project_repo, vote_repo, session)


def get_report_service(project_repo: ProjectRepo, session: DBSession) -> ReportService:
    """Get report service."""
    return ReportService(project_repo, session)


ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
VotingServiceDep = Annotated[VotingService, Depends(get_voting_service)]
ReportServiceDep = Annotated[ReportService, Depends(get_report_service)]
