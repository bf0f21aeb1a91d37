"""Model exports.

Import from here: `from src.expovote.models import Project, Vote`
"""

from src.expovote.models.enums import ResultOrder
from src.expovote.models.project import MAX_PROJECT_NAME_LENGTH, Project
from src.expovote.models.vote import VOTER_ID_LENGTH, Vote

__all__ = [
    # Enums
    "ResultOrder",
    # Tables
    "Project",
    "Vote",
    # Limits
    "MAX_PROJECT_NAME_LENGTH",
    "VOTER_ID_LENGTH",
]
