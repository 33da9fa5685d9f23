"""Error taxonomy for stores and repositories.

Store adapters raise ``StoreError`` subclasses. Repositories translate them
into ``RepositoryError`` subclasses and record the resulting ``ErrorDetail``
in the category state instead of propagating.
"""

from dataclasses import dataclass

from src.hub.models.enums import ErrorKind


class HubError(Exception):
    """Base class for every error raised by this package."""


# --- Store layer ---


class StoreError(HubError):
    """A collection store rejected or failed to execute a request."""

    def __init__(self, message: str, collection: str | None = None):
        super().__init__(message)
        self.collection = collection


class DocumentNotFound(StoreError):
    """No document with the given id exists in the collection."""

    def __init__(self, collection: str, document_id: str):
        super().__init__(f"Document '{document_id}' not found in '{collection}'", collection)
        self.document_id = document_id


# --- Repository layer ---


@dataclass(frozen=True)
class ErrorDetail:
    """Immutable description of the last failed repository operation."""

    kind: ErrorKind
    message: str
    operation: str
    record_id: str | None = None
    cause: str | None = None


class RepositoryError(HubError):
    """A repository operation failed."""

    kind: ErrorKind

    def __init__(self, message: str, operation: str, record_id: str | None = None):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.record_id = record_id

    def to_detail(self) -> ErrorDetail:
        cause = self.__cause__
        return ErrorDetail(
            kind=self.kind,
            message=self.message,
            operation=self.operation,
            record_id=self.record_id,
            cause=str(cause) if cause is not None else None,
        )


class NotFoundError(RepositoryError):
    kind = ErrorKind.NOT_FOUND


class WriteFailedError(RepositoryError):
    kind = ErrorKind.WRITE_FAILED


class QueryFailedError(RepositoryError):
    kind = ErrorKind.QUERY_FAILED
