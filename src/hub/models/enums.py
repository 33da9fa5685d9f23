"""Shared enums for models."""

from enum import Enum


class ProjectCategory(str, Enum):
    """Project category, one collection each."""

    WEBSITE = "website"
    APP = "app"
    GRAPHICS = "graphics"
    SEO = "seo"
    CONTENT = "content"


class SortDirection(str, Enum):
    """Sort direction for a single-field ordering."""

    ASC = "asc"
    DESC = "desc"


class FilterOperator(str, Enum):
    """Filter operators supported by collection stores."""

    EQUALS = "equals"
    ARRAY_CONTAINS = "array_contains"


class RepositoryStatus(str, Enum):
    """Repository state machine."""

    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"


class ErrorKind(str, Enum):
    """Failure taxonomy surfaced in the category state."""

    NOT_FOUND = "not_found"
    WRITE_FAILED = "write_failed"
    QUERY_FAILED = "query_failed"
    # Writes are never validated locally; a store rejection is reported as
    # WRITE_FAILED. Kept so callers can document the gap explicitly.
    VALIDATION_SKIPPED = "validation_skipped"
