"""FastAPI dependency injection definitions."""

from src.expovote.api.dependencies.db import DBSession, get_db_session
from src.expovote.api.dependencies.repositories import (
    ProjectRepo,
    VoteRepo,
    get_project_repository,
    get_vote_repository,
)
from src.expovote.api.dependencies.request import (
    PublicBaseUrl,
    VoterId,
    get_public_base_url,
    get_voter_id,
)
from src.expovote.api.dependencies.services import (
    ProjectServiceDep,
    ReportServiceDep,
    VotingServiceDep,
    get_project_service,
    get_report_service,
    get_voting_service,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Repositories
    "ProjectRepo",
    "VoteRepo",
    "get_project_repository",
    "get_vote_repository",
    # Request
    "PublicBaseUrl",
    "VoterId",
    "get_public_base_url",
    "get_voter_id",
    # Services
    "ProjectServiceDep",
    "ReportServiceDep",
    "VotingServiceDep",
    "get_project_service",
    "get_report_service",
    "get_voting_service",
]
