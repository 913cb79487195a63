from __future__ import annotations

import datetime as dt

from sqlalchemy import DateTime, Index, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _utcnow_naive() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc).replace(tzinfo=None)


class Base(DeclarativeBase):
    pass


class Document(Base):
    """
    One document of the hierarchical store.

    A document path like ``artifacts/app/users/u1/logs/2026-01-05`` is split into
    its collection (``artifacts/app/users/u1/logs``) and its id (``2026-01-05``),
    so listing a collection is a single indexed lookup.
    """

    __tablename__ = "documents"
    __table_args__ = (UniqueConstraint("collection", "doc_id", name="uq_documents_collection_doc"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    collection: Mapped[str] = mapped_column(String(512), index=True)
    doc_id: Mapped[str] = mapped_column(String(128))

    # document body, JSON object
    data_json: Mapped[str] = mapped_column(Text)

    created_at: Mapped[dt.datetime] = mapped_column(DateTime, default=_utcnow_naive)
    updated_at: Mapped[dt.datetime] = mapped_column(DateTime, default=_utcnow_naive, onupdate=_utcnow_naive)


Index("ix_documents_collection_updated", Document.collection, Document.updated_at)
