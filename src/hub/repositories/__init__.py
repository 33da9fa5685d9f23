"""Repository layer - data access for project categories."""

from src.hub.repositories.project import DEFAULT_SORT_FIELD, ProjectRepository
from src.hub.repositories.state import CategoryState

__all__ = [
    "DEFAULT_SORT_FIELD",
    "CategoryState",
    "ProjectRepository",
]
