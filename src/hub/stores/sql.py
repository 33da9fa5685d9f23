"""PostgreSQL collection store.

All collections share the ``project_documents`` table. Scalar equality and
array membership use JSONB containment so the GIN index on ``data`` serves
them; equality on an array or object compares the whole value at the path.
Ordering uses the JSONB value at the sort path, with missing values last.
"""

from collections.abc import Mapping, Sequence
from typing import Any
from uuid import uuid4

from sqlalchemy import delete, type_coerce, update
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlmodel import col, select

from src.hub.core.db import get_session
from src.hub.core.exceptions import DocumentNotFound, StoreError
from src.hub.core.logging import get_logger
from src.hub.models.document import ProjectDocument
from src.hub.models.enums import FilterOperator, SortDirection
from src.hub.stores.base import Document, QueryFilter, QuerySort, split_path

logger = get_logger(__name__)


def _nest(path: str, value: Any) -> dict[str, Any]:
    """Build ``{"a": {"b": value}}`` from ``"a.b"``."""
    nested: Any = value
    for part in reversed(split_path(path)):
        nested = {part: nested}
    return nested


def build_filter(clause: QueryFilter) -> Any:
    """Translate a filter clause into a JSONB predicate."""
    data = col(ProjectDocument.data)
    if clause.operator == FilterOperator.EQUALS:
        if isinstance(clause.value, list | dict):
            # Containment matches supersets, so compare arrays and objects whole
            return data[split_path(clause.field)] == type_coerce(clause.value, JSONB)
        return data.contains(_nest(clause.field, clause.value))
    if clause.operator == FilterOperator.ARRAY_CONTAINS:
        return data.contains(_nest(clause.field, [clause.value]))
    raise StoreError(f"Unsupported filter operator: {clause.operator}")


def build_order(sort: QuerySort) -> Any:
    """Translate a sort clause into an ORDER BY expression."""
    value = col(ProjectDocument.data)[split_path(sort.field)]
    ordered = value.asc() if sort.direction == SortDirection.ASC else value.desc()
    return ordered.nulls_last()


class SqlCollectionStore:
    """``CollectionStore`` backed by PostgreSQL via SQLAlchemy asyncio.

    One session per call; the store does not own the engine.
    """

    def __init__(self, engine: AsyncEngine | None = None):
        self.engine = engine

    async def query(
        self,
        collection: str,
        filters: Sequence[QueryFilter] = (),
        sort: QuerySort | None = None,
    ) -> list[Document]:
        stmt = select(ProjectDocument.id, ProjectDocument.data).where(
            ProjectDocument.collection == collection
        )
        for clause in filters:
            stmt = stmt.where(build_filter(clause))
        if sort is not None:
            stmt = stmt.order_by(build_order(sort))

        try:
            async with get_session(self.engine) as session:
                result = await session.execute(stmt)
                rows = result.all()
        except SQLAlchemyError as e:
            raise StoreError(f"Query on '{collection}' failed: {e}", collection) from e

        return [Document(id=row.id, data=dict(row.data)) for row in rows]

    async def get_one(self, collection: str, document_id: str) -> Document:
        try:
            async with get_session(self.engine) as session:
                document = await session.get(ProjectDocument, (collection, document_id))
        except SQLAlchemyError as e:
            raise StoreError(f"Read from '{collection}' failed: {e}", collection) from e

        if document is None:
            raise DocumentNotFound(collection, document_id)
        return Document(id=document.id, data=dict(document.data))

    async def insert(self, collection: str, data: Mapping[str, Any]) -> str:
        document = ProjectDocument(collection=collection, id=uuid4().hex, data=dict(data))
        try:
            async with get_session(self.engine) as session:
                session.add(document)
                await session.commit()
        except SQLAlchemyError as e:
            raise StoreError(f"Insert into '{collection}' failed: {e}", collection) from e

        logger.debug("Document inserted", collection=collection, document_id=document.id)
        return document.id

    async def patch(self, collection: str, document_id: str, data: Mapping[str, Any]) -> None:
        # jsonb || jsonb replaces top-level keys and leaves the rest alone
        stmt = (
            update(ProjectDocument)
            .where(
                col(ProjectDocument.collection) == collection,
                col(ProjectDocument.id) == document_id,
            )
            .values(data=col(ProjectDocument.data).op("||")(type_coerce(dict(data), JSONB)))
        )
        try:
            async with get_session(self.engine) as session:
                result = await session.execute(stmt)
                await session.commit()
        except SQLAlchemyError as e:
            raise StoreError(f"Update in '{collection}' failed: {e}", collection) from e

        if result.rowcount == 0:  # type: ignore[attr-defined]
            raise DocumentNotFound(collection, document_id)

    async def remove(self, collection: str, document_id: str) -> None:
        stmt = delete(ProjectDocument).where(
            col(ProjectDocument.collection) == collection,
            col(ProjectDocument.id) == document_id,
        )
        try:
            async with get_session(self.engine) as session:
                result = await session.execute(stmt)
                await session.commit()
        except SQLAlchemyError as e:
            raise StoreError(f"Delete from '{collection}' failed: {e}", collection) from e

        if result.rowcount == 0:  # type: ignore[attr-defined]
            raise DocumentNotFound(collection, document_id)
        logger.debug("Document removed", collection=collection, document_id=document_id)
