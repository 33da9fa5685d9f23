"""In-process collection store.

Used for local development and as the store test double. Documents are
deep-copied on the way in and out so callers never share state with the
store.
"""

import asyncio
import copy
import json
from collections.abc import Mapping, Sequence
from typing import Any
from uuid import uuid4

from src.hub.core.exceptions import DocumentNotFound, StoreError
from src.hub.core.logging import get_logger
from src.hub.models.enums import FilterOperator, SortDirection
from src.hub.stores.base import Document, QueryFilter, QuerySort, resolve_path

logger = get_logger(__name__)

_MISSING = object()


def _type_rank(value: Any) -> int:
    """Cross-type ordering, following PostgreSQL's jsonb ordering."""
    if value is None:
        return 0
    if isinstance(value, str):
        return 1
    if isinstance(value, bool):
        return 3
    if isinstance(value, int | float):
        return 2
    if isinstance(value, list):
        return 4
    return 5


def _sort_key(value: Any) -> tuple[int, Any]:
    rank = _type_rank(value)
    if rank == 0:
        return (rank, 0)
    if rank >= 4:
        # Arrays and objects compare by canonical JSON text
        return (rank, json.dumps(value, sort_keys=True, default=str))
    return (rank, value)


def _matches(data: Mapping[str, Any], clause: QueryFilter) -> bool:
    value = resolve_path(data, clause.field, _MISSING)
    if value is _MISSING:
        return False
    if clause.operator == FilterOperator.EQUALS:
        return value == clause.value
    if clause.operator == FilterOperator.ARRAY_CONTAINS:
        return isinstance(value, list) and clause.value in value
    raise StoreError(f"Unsupported filter operator: {clause.operator}")


class MemoryCollectionStore:
    """Dictionary-backed implementation of ``CollectionStore``.

    Args:
        latency: Seconds to sleep before each call completes. Zero still
                 yields to the event loop once, like a network round trip.
    """

    def __init__(self, latency: float = 0.0):
        self._collections: dict[str, dict[str, dict[str, Any]]] = {}
        self._latency = latency
        self._lock = asyncio.Lock()

    async def _round_trip(self) -> None:
        await asyncio.sleep(self._latency)

    def _collection(self, name: str) -> dict[str, dict[str, Any]]:
        return self._collections.setdefault(name, {})

    async def query(
        self,
        collection: str,
        filters: Sequence[QueryFilter] = (),
        sort: QuerySort | None = None,
    ) -> list[Document]:
        await self._round_trip()
        async with self._lock:
            matched = [
                (doc_id, data)
                for doc_id, data in self._collection(collection).items()
                if all(_matches(data, clause) for clause in filters)
            ]

        if sort is not None:
            present = []
            absent = []
            for item in matched:
                value = resolve_path(item[1], sort.field, _MISSING)
                (absent if value is _MISSING else present).append((value, item))
            present.sort(
                key=lambda pair: _sort_key(pair[0]),
                reverse=sort.direction == SortDirection.DESC,
            )
            # Documents without the sort field come last in either direction
            matched = [item for _, item in present] + [item for _, item in absent]

        return [Document(id=doc_id, data=copy.deepcopy(data)) for doc_id, data in matched]

    async def get_one(self, collection: str, document_id: str) -> Document:
        await self._round_trip()
        async with self._lock:
            data = self._collection(collection).get(document_id)
            if data is None:
                raise DocumentNotFound(collection, document_id)
            return Document(id=document_id, data=copy.deepcopy(data))

    async def insert(self, collection: str, data: Mapping[str, Any]) -> str:
        await self._round_trip()
        document_id = uuid4().hex
        async with self._lock:
            self._collection(collection)[document_id] = copy.deepcopy(dict(data))
        logger.debug("Document inserted", collection=collection, document_id=document_id)
        return document_id

    async def patch(self, collection: str, document_id: str, data: Mapping[str, Any]) -> None:
        await self._round_trip()
        async with self._lock:
            documents = self._collection(collection)
            if document_id not in documents:
                raise DocumentNotFound(collection, document_id)
            # Top-level keys are replaced wholesale, nested objects are not merged
            documents[document_id].update(copy.deepcopy(dict(data)))

    async def remove(self, collection: str, document_id: str) -> None:
        await self._round_trip()
        async with self._lock:
            documents = self._collection(collection)
            if document_id not in documents:
                raise DocumentNotFound(collection, document_id)
            del documents[document_id]
        logger.debug("Document removed", collection=collection, document_id=document_id)

    def clear(self) -> None:
        """Drop every collection."""
        self._collections.clear()
