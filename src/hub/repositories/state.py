"""Category state container.

Holds what the dashboard renders for one category: the loaded records, the
selected record, the loading flag and the last error. Only the owning
repository mutates it; readers subscribe to be told about changes.
"""

from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

from src.hub.core.exceptions import ErrorDetail
from src.hub.core.logging import get_logger
from src.hub.models.enums import RepositoryStatus
from src.hub.schemas.project import ProjectRecord

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=ProjectRecord)


class CategoryState(Generic[RecordT]):
    """In-memory view of one category's records.

    Invariant: ``records`` never holds two records with the same id.
    """

    def __init__(self) -> None:
        self._records: list[RecordT] = []
        self._selected: RecordT | None = None
        self._status = RepositoryStatus.IDLE
        self._error: ErrorDetail | None = None
        self._listeners: list[Callable[["CategoryState[RecordT]"], None]] = []

    # --- Read side ---

    @property
    def records(self) -> list[RecordT]:
        return list(self._records)

    @property
    def selected(self) -> RecordT | None:
        return self._selected

    @property
    def status(self) -> RepositoryStatus:
        return self._status

    @property
    def loading(self) -> bool:
        return self._status == RepositoryStatus.LOADING

    @property
    def error(self) -> ErrorDetail | None:
        return self._error

    def subscribe(self, listener: Callable[["CategoryState[RecordT]"], None]) -> Callable[[], None]:
        """Register a change listener. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception as e:
                # A broken listener must not break the repository operation
                logger.warning("State listener failed", error=str(e))

    # --- Write side (owning repository only) ---

    def begin(self) -> None:
        """Enter loading; a previous error is cleared, not acknowledged."""
        self._status = RepositoryStatus.LOADING
        self._error = None
        self._notify()

    def finish(self) -> None:
        if self._status == RepositoryStatus.LOADING:
            self._status = RepositoryStatus.IDLE
            self._notify()

    def fail(self, detail: ErrorDetail) -> None:
        self._status = RepositoryStatus.ERROR
        self._error = detail
        self._notify()

    def set_records(self, records: Iterable[RecordT]) -> None:
        """Replace the record list, keeping the first record seen per id."""
        seen: set[str] = set()
        unique: list[RecordT] = []
        for record in records:
            if record.id not in seen:
                seen.add(record.id)
                unique.append(record)
        self._records = unique
        self._notify()

    def select(self, record: RecordT | None) -> None:
        self._selected = record
        self._notify()

    def replace_record(self, record: RecordT) -> None:
        """Swap in a confirmed copy of a record already in the list."""
        for index, existing in enumerate(self._records):
            if existing.id == record.id:
                self._records[index] = record
                self._notify()
                return

    def remove_record(self, record_id: str) -> None:
        """Prune a deleted record from the list and the selection."""
        self._records = [record for record in self._records if record.id != record_id]
        if self._selected is not None and self._selected.id == record_id:
            self._selected = None
        self._notify()
