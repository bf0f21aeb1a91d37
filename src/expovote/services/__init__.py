from src.expovote.services.project_service import ProjectService
from src.expovote.services.report_service import ReportService
from src.expovote.services.voting_service import VotingService

__all__ = ["ProjectService", "ReportService", "VotingService"]
