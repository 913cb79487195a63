"""
Document store used for the profile, daily logs and weekly check-ins.

Paths alternate collection and document segments, so a document path has an
even number of segments (``artifacts/app/users/u1/logs/2026-01-05``) and a
collection path an odd number (``artifacts/app/users/u1/logs``).

Changes are observed by polling: ``subscribe`` returns a handle whose
``cancel()`` stops the poll task.
"""

from __future__ import annotations

import asyncio
import contextlib
import inspect
import logging
from typing import Any, Awaitable, Callable, Protocol

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from resetfit.config import settings
from resetfit.jsonutil import dumps, loads_object
from resetfit.models import Document


logger = logging.getLogger(__name__)

OnChange = Callable[[Any], Awaitable[None] | None]


def split_path(path: str) -> list[str]:
    parts = [p for p in path.strip("/").split("/") if p]
    if not parts:
        raise ValueError("empty document path")
    return parts


def is_document_path(path: str) -> bool:
    return len(split_path(path)) % 2 == 0


def document_key(path: str) -> tuple[str, str]:
    parts = split_path(path)
    if len(parts) % 2 != 0:
        raise ValueError(f"not a document path (odd segment count): {path!r}")
    return "/".join(parts[:-1]), parts[-1]


def collection_key(path: str) -> str:
    parts = split_path(path)
    if len(parts) % 2 != 1:
        raise ValueError(f"not a collection path (even segment count): {path!r}")
    return "/".join(parts)


def join_path(*segments: Any) -> str:
    return "/".join(str(s).strip("/") for s in segments)


class Subscription:
    def __init__(self, path: str, task: asyncio.Task[None]):
        self.path = path
        self._task = task

    @property
    def active(self) -> bool:
        return not self._task.done()

    def cancel(self) -> None:
        self._task.cancel()

    async def aclose(self) -> None:
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task


class DocumentStore(Protocol):
    async def read_document(self, path: str) -> dict[str, Any] | None: ...

    async def list_documents(self, collection_path: str) -> dict[str, dict[str, Any]]: ...

    async def write_document(self, path: str, fields: dict[str, Any], *, merge: bool = False) -> None: ...

    def subscribe(self, path: str, on_change: OnChange) -> Subscription: ...


async def _poll(path: str, fetch: Callable[[], Awaitable[Any]], on_change: OnChange, interval_s: float) -> None:
    last: Any = object()
    while True:
        try:
            snap = await fetch()
        except Exception:
            logger.exception("SYNC_READ_ERROR: %s", path)
        else:
            if snap != last:
                last = snap
                try:
                    res = on_change(snap)
                    if inspect.isawaitable(res):
                        await res
                except Exception:
                    logger.exception("SYNC_CALLBACK_ERROR: %s", path)
        await asyncio.sleep(interval_s)


class SqlDocumentStore:
    """DocumentStore on top of the ``documents`` table."""

    def __init__(
        self,
        sessionmaker: async_sessionmaker[AsyncSession] | None = None,
        *,
        poll_interval_s: float | None = None,
    ):
        if sessionmaker is None:
            from resetfit.db import SessionLocal

            sessionmaker = SessionLocal
        self._sessionmaker = sessionmaker
        self.poll_interval_s = settings.sync_poll_interval_s if poll_interval_s is None else poll_interval_s

    async def _get(self, db: AsyncSession, collection: str, doc_id: str) -> Document | None:
        q: Select[tuple[Document]] = (
            select(Document).where(Document.collection == collection).where(Document.doc_id == doc_id)
        )
        res = await db.execute(q)
        return res.scalar_one_or_none()

    async def read_document(self, path: str) -> dict[str, Any] | None:
        collection, doc_id = document_key(path)
        async with self._sessionmaker() as db:
            d = await self._get(db, collection, doc_id)
            if d is None:
                return None
            return loads_object(d.data_json)

    async def list_documents(self, collection_path: str) -> dict[str, dict[str, Any]]:
        collection = collection_key(collection_path)
        async with self._sessionmaker() as db:
            q = select(Document).where(Document.collection == collection).order_by(Document.doc_id.asc())
            res = await db.execute(q)
            return {d.doc_id: loads_object(d.data_json) for d in res.scalars().all()}

    async def write_document(self, path: str, fields: dict[str, Any], *, merge: bool = False) -> None:
        """
        Create or update a document.

        With ``merge`` the given top-level fields are laid over the stored body
        and every other field is kept; without it the body is replaced.
        """
        collection, doc_id = document_key(path)
        async with self._sessionmaker() as db:
            d = await self._get(db, collection, doc_id)
            if d is None:
                d = Document(collection=collection, doc_id=doc_id, data_json=dumps(dict(fields)))
                db.add(d)
            else:
                body = loads_object(d.data_json) if merge else {}
                body.update(fields)
                d.data_json = dumps(body)
            await db.commit()

    def subscribe(self, path: str, on_change: OnChange) -> Subscription:
        if is_document_path(path):
            fetch: Callable[[], Awaitable[Any]] = lambda: self.read_document(path)
        else:
            fetch = lambda: self.list_documents(path)
        task = asyncio.get_running_loop().create_task(_poll(path, fetch, on_change, self.poll_interval_s))
        return Subscription(path, task)
