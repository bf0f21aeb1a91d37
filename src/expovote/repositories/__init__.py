"""Repository layer - data access abstraction."""

from src.expovote.repositories.base import BaseRepository
from src.expovote.repositories.project import ProjectRepository
from src.expovote.repositories.vote import VoteRepository

__all__ = [
    "BaseRepository",
    "ProjectRepository",
    "VoteRepository",
]
