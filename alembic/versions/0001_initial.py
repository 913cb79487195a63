"""documents table

Revision ID: 0001_initial
Revises: 
Create Date: 2026-10-19
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "documents",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("collection", sa.String(length=512), nullable=False),
        sa.Column("doc_id", sa.String(length=128), nullable=False),
        sa.Column("data_json", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.UniqueConstraint("collection", "doc_id", name="uq_documents_collection_doc"),
    )
    op.create_index("ix_documents_collection", "documents", ["collection"], unique=False)
    op.create_index("ix_documents_collection_updated", "documents", ["collection", "updated_at"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_documents_collection_updated", table_name="documents")
    op.drop_index("ix_documents_collection", table_name="documents")
    op.drop_table("documents")
