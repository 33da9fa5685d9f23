"""Generic project repository, parametrised by a category schema."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Generic, TypeVar, cast

from pydantic import BaseModel, ValidationError

from src.hub.categories.base import CategorySchema
from src.hub.core.exceptions import (
    DocumentNotFound,
    ErrorDetail,
    NotFoundError,
    QueryFailedError,
    RepositoryError,
    StoreError,
    WriteFailedError,
)
from src.hub.core.logging import get_logger, operation_context
from src.hub.models.base import to_document_timestamp, utc_now
from src.hub.models.enums import RepositoryStatus, SortDirection
from src.hub.repositories.state import CategoryState
from src.hub.schemas.project import ProjectRecord, to_document
from src.hub.stores.base import CollectionStore, Document, QueryFilter, QuerySort

logger = get_logger(__name__)

DEFAULT_SORT_FIELD = "createdAt"

RecordT = TypeVar("RecordT", bound=ProjectRecord)


class ProjectRepository(Generic[RecordT]):
    """CRUD, listing and search for one project category.

    Every public operation catches store failures, records them in
    ``state.error`` and returns a sentinel (``None`` or ``False``) instead of
    raising. Each call is an independent request: overlapping ``list`` or
    ``search`` calls both complete and whichever resolves last owns
    ``records``.
    """

    def __init__(
        self,
        schema: CategorySchema,
        store: CollectionStore,
        clock: Callable[[], datetime] = utc_now,
        collection_prefix: str = "",
    ):
        self.schema = schema
        self.store = store
        self.clock = clock
        self.collection = schema.collection_name(collection_prefix)
        self.state: CategoryState[RecordT] = CategoryState()

    # --- State passthrough for the dashboard ---

    @property
    def records(self) -> list[RecordT]:
        return self.state.records

    @property
    def selected(self) -> RecordT | None:
        return self.state.selected

    @property
    def loading(self) -> bool:
        return self.state.loading

    @property
    def error(self) -> ErrorDetail | None:
        return self.state.error

    @property
    def status(self) -> RepositoryStatus:
        return self.state.status

    # --- Operations ---

    async def list(
        self,
        filters: Mapping[str, Any] | None = None,
        sort_field: str = DEFAULT_SORT_FIELD,
        sort_direction: SortDirection | str = SortDirection.DESC,
    ) -> list[RecordT] | None:
        """Fetch every record matching all filters, in the requested order.

        Replaces ``records`` wholesale. Returns None on failure, leaving the
        previous ``records`` in place.
        """
        clauses = self.schema.build_filters(filters)
        sort = QuerySort(sort_field, SortDirection(sort_direction))

        with self._operation("list"):
            records = await self._query(clauses, sort, "list")
            # TODO: tag list/search calls with a sequence number and drop responses
            # older than the last one applied, so a slow request cannot overwrite a newer one.
            self.state.set_records(records)
            logger.debug(
                "Projects listed",
                count=len(records),
                filters=[clause.field for clause in clauses],
                sort_field=sort.field,
                sort_direction=sort.direction.value,
            )
            return records
        return None

    async def get_by_id(self, record_id: str) -> RecordT | None:
        """Fetch one record and make it the selection."""
        with self._operation("get_by_id", record_id):
            if not record_id:
                raise NotFoundError("A project id is required", "get_by_id")
            record = await self._fetch_one(record_id, "get_by_id")
            self.state.select(record)
            return record
        return None

    async def create(self, data: BaseModel | Mapping[str, Any]) -> RecordT | None:
        """Write a new record and return it as the store persisted it.

        ``id``, ``createdAt`` and ``updatedAt`` in ``data`` are ignored; both
        timestamps are stamped from a single clock reading. The created record
        becomes the selection but is not added to ``records``.
        """
        payload = to_document(data)
        now = to_document_timestamp(self.clock())
        payload["createdAt"] = now
        payload["updatedAt"] = now

        with self._operation("create"):
            try:
                record_id = await self.store.insert(self.collection, payload)
            except StoreError as e:
                raise WriteFailedError(f"Failed to create {self._noun}", "create") from e
            record = await self._read_back(record_id, "create")
            self.state.select(record)
            logger.info("Project created", record_id=record_id)
            return record
        return None

    async def update(
        self, record_id: str, data: BaseModel | Mapping[str, Any]
    ) -> RecordT | None:
        """Merge the given top-level fields into a record and refresh ``updatedAt``.

        ``data`` is usually the category's ``ProjectUpdate`` model or a plain
        mapping. Fields absent from it are untouched. Nothing in memory changes
        until the store confirms the write; the re-fetched record then becomes
        the selection and replaces its copy in ``records``.
        """
        payload = to_document(data, partial=True)
        payload["updatedAt"] = to_document_timestamp(self.clock())

        with self._operation("update", record_id):
            if not record_id:
                raise WriteFailedError("A project id is required", "update")
            try:
                await self.store.patch(self.collection, record_id, payload)
            except StoreError as e:
                raise WriteFailedError(
                    f"Failed to update {self._noun}", "update", record_id
                ) from e
            record = await self._read_back(record_id, "update")
            self.state.select(record)
            self.state.replace_record(record)
            logger.info("Project updated", fields=sorted(payload))
            return record
        return None

    async def delete(self, record_id: str) -> bool:
        """Remove a record from the store, then from ``records`` and the selection."""
        with self._operation("delete", record_id):
            if not record_id:
                raise WriteFailedError("A project id is required", "delete")
            try:
                await self.store.remove(self.collection, record_id)
            except StoreError as e:
                raise WriteFailedError(
                    f"Failed to delete {self._noun}", "delete", record_id
                ) from e
            self.state.remove_record(record_id)
            logger.info("Project deleted")
            return True
        return False

    async def search(self, term: str) -> list[RecordT] | None:
        """Keep only records whose name contains ``term``, ignoring case.

        Fetches the whole collection and filters client-side, so every search
        costs one full read. An empty term returns everything.
        """
        needle = term.lower()

        with self._operation("search"):
            records = await self._query(
                [], QuerySort(DEFAULT_SORT_FIELD, SortDirection.DESC), "search"
            )
            matches = [record for record in records if needle in record.name.lower()]
            self.state.set_records(matches)
            logger.debug("Projects searched", scanned=len(records), count=len(matches))
            return matches
        return None

    # --- Internals ---

    @property
    def _noun(self) -> str:
        return f"{self.schema.label} project"

    @contextmanager
    def _operation(self, operation: str, record_id: str | None = None) -> Iterator[None]:
        """Run one operation through the loading / error state machine.

        A ``RepositoryError`` raised in the block is recorded in the state and
        suppressed, so execution continues after the ``with`` statement where
        the caller returns its failure sentinel. Anything else propagates, but
        the state never stays loading.
        """
        context = {"record_id": record_id} if record_id else {}
        with operation_context(self.schema.category.value, operation, **context):
            self.state.begin()
            try:
                yield
            except RepositoryError as e:
                logger.error(
                    "Project operation failed",
                    kind=e.kind.value,
                    error=e.message,
                    cause=str(e.__cause__) if e.__cause__ else None,
                )
                self.state.fail(e.to_detail())
            finally:
                self.state.finish()

    def _to_record(self, document: Document) -> RecordT:
        record = self.schema.record_model.model_validate({**document.data, "id": document.id})
        return cast(RecordT, record)

    async def _query(
        self, clauses: Sequence[QueryFilter], sort: QuerySort, operation: str
    ) -> list[RecordT]:
        """Run a store query, skipping documents that do not fit the record model."""
        try:
            documents = await self.store.query(self.collection, clauses, sort)
        except StoreError as e:
            raise QueryFailedError(f"Failed to fetch {self._noun}s", operation) from e

        records: list[RecordT] = []
        for document in documents:
            try:
                records.append(self._to_record(document))
            except ValidationError as e:
                logger.warning(
                    "Skipping malformed project document",
                    record_id=document.id,
                    errors=[".".join(map(str, error["loc"])) for error in e.errors()],
                )
        return records

    async def _read_back(self, record_id: str, operation: str) -> RecordT:
        """Re-fetch a record just written. Failing to read it fails the write."""
        try:
            return await self._fetch_one(record_id, operation)
        except RepositoryError as e:
            raise WriteFailedError(
                f"Saved {self._noun} could not be read back", operation, record_id
            ) from e

    async def _fetch_one(self, record_id: str, operation: str) -> RecordT:
        try:
            document = await self.store.get_one(self.collection, record_id)
            return self._to_record(document)
        except DocumentNotFound as e:
            raise NotFoundError(f"{self._noun} not found", operation, record_id) from e
        except StoreError as e:
            raise QueryFailedError(f"Failed to fetch {self._noun}", operation, record_id) from e
        except ValidationError as e:
            raise QueryFailedError(f"Stored {self._noun} is malformed", operation, record_id) from e
