"""Collection store contract.

A collection store is the remote document database as seen by the
repositories: named collections of JSON documents keyed by a store-assigned
id, with equality / array-membership filters and a single-field sort.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from src.hub.models.enums import FilterOperator, SortDirection

_MISSING = object()


@dataclass(frozen=True)
class Document:
    """A stored document: its id plus the JSON payload (without the id)."""

    id: str
    data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class QueryFilter:
    """One filter clause. ``field`` may be a dotted path into nested objects."""

    field: str
    operator: FilterOperator
    value: Any


@dataclass(frozen=True)
class QuerySort:
    field: str
    direction: SortDirection = SortDirection.DESC


@runtime_checkable
class CollectionStore(Protocol):
    """Request/response access to a document database.

    Every failure is raised as a ``StoreError``; unknown ids on
    ``get_one``, ``patch`` and ``remove`` raise ``DocumentNotFound``.
    """

    async def query(
        self,
        collection: str,
        filters: Sequence[QueryFilter] = (),
        sort: QuerySort | None = None,
    ) -> list[Document]: ...

    async def get_one(self, collection: str, document_id: str) -> Document: ...

    async def insert(self, collection: str, data: Mapping[str, Any]) -> str: ...

    async def patch(self, collection: str, document_id: str, data: Mapping[str, Any]) -> None: ...

    async def remove(self, collection: str, document_id: str) -> None: ...


def split_path(path: str) -> tuple[str, ...]:
    """Split a dotted document path, rejecting empty segments."""
    parts = tuple(path.split("."))
    if not all(parts):
        raise ValueError(f"Invalid document path: {path!r}")
    return parts


def resolve_path(data: Mapping[str, Any], path: str, default: Any = _MISSING) -> Any:
    """Look up a dotted path in a nested mapping.

    Returns ``default`` (or raises ``KeyError`` when no default is given) if
    any segment is missing or a non-mapping is reached early.
    """
    current: Any = data
    for part in split_path(path):
        if not isinstance(current, Mapping) or part not in current:
            if default is _MISSING:
                raise KeyError(path)
            return default
        current = current[part]
    return current
