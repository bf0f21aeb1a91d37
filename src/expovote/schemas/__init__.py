from src.expovote.schemas.health import HealthError, HealthOk
from src.expovote.schemas.project import ProjectCreate, ProjectTally
from src.expovote.schemas.report import Report

__all__ = [
    "HealthError",
    "HealthOk",
    "ProjectCreate",
    "ProjectTally",
    "Report",
]
