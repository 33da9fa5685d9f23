"""Model exports.

Import from here: `from src.hub.models import ProjectDocument, ProjectCategory`
"""

from src.hub.models.base import to_document_timestamp, utc_now
from src.hub.models.document import ProjectDocument
from src.hub.models.enums import (
    ErrorKind,
    FilterOperator,
    ProjectCategory,
    RepositoryStatus,
    SortDirection,
)

__all__ = [
    # Helpers
    "to_document_timestamp",
    "utc_now",
    # Enums
    "ErrorKind",
    "FilterOperator",
    "ProjectCategory",
    "RepositoryStatus",
    "SortDirection",
    # Tables
    "ProjectDocument",
]
