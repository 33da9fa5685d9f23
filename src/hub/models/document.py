"""Project document model - backing table for the SQL collection store."""

from datetime import datetime
from typing import Any

from sqlalchemy import Column, DateTime, Index
from sqlalchemy.dialects.postgresql import JSONB
from sqlmodel import Field, SQLModel

from src.hub.models.base import utc_now


class ProjectDocument(SQLModel, table=True):
    """One JSON document in a named collection.

    The document id is kept out of ``data``; it is the second half of the
    primary key. ``created_at`` is the row insertion time and is unrelated to
    the ``createdAt`` key the repositories stamp inside ``data``.
    """

    __tablename__ = "project_documents"
    __table_args__ = (
        Index("ix_project_documents_data", "data", postgresql_using="gin"),
        Index("ix_project_documents_collection_created_at", "collection", "created_at"),
    )

    collection: str = Field(primary_key=True, max_length=100)
    id: str = Field(primary_key=True, max_length=64)
    data: dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSONB, nullable=False))
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
