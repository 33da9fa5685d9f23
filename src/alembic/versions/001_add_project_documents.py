"""Add project_documents table

Revision ID: 001
Revises:
Create Date: 2026-10-17 00:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
import sqlmodel
from sqlalchemy.dialects import postgresql

from alembic import op

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "project_documents",
        sa.Column("collection", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column("id", sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column("data", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("collection", "id"),
    )
    op.create_index(
        "ix_project_documents_data",
        "project_documents",
        ["data"],
        unique=False,
        postgresql_using="gin",
    )
    op.create_index(
        "ix_project_documents_collection_created_at",
        "project_documents",
        ["collection", "created_at"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_project_documents_collection_created_at", table_name="project_documents")
    op.drop_index("ix_project_documents_data", table_name="project_documents")
    op.drop_table("project_documents")
