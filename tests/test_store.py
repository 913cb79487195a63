from __future__ import annotations

import asyncio

import pytest

from resetfit.store import SqlDocumentStore, document_key, is_document_path, join_path

from helpers import eventually


def test_path_helpers() -> None:
    assert is_document_path("artifacts/app/users/u1/profile/main")
    assert not is_document_path("artifacts/app/users/u1/logs")
    assert document_key("/a/b/c/d/") == ("a/b/c", "d")
    assert join_path("a", "b", 3) == "a/b/3"
    with pytest.raises(ValueError):
        document_key("a/b/c")
    with pytest.raises(ValueError):
        document_key("")


@pytest.mark.asyncio
async def test_read_missing_document(store: SqlDocumentStore) -> None:
    assert await store.read_document("col/doc") is None


@pytest.mark.asyncio
async def test_merge_keeps_other_fields(store: SqlDocumentStore) -> None:
    await store.write_document("logs/2024-01-01", {"calories": 1800, "sleep": 7})
    await store.write_document("logs/2024-01-01", {"calories": 1750, "protein": 150}, merge=True)
    assert await store.read_document("logs/2024-01-01") == {"calories": 1750, "sleep": 7, "protein": 150}


@pytest.mark.asyncio
async def test_write_without_merge_replaces(store: SqlDocumentStore) -> None:
    await store.write_document("checkins/3", {"weight": "180", "notes": "first"})
    await store.write_document("checkins/3", {"weight": "179"})
    assert await store.read_document("checkins/3") == {"weight": "179"}
    assert list(await store.list_documents("checkins")) == ["3"]


@pytest.mark.asyncio
async def test_list_documents_only_direct_children(store: SqlDocumentStore) -> None:
    await store.write_document("users/u1", {"n": 1})
    await store.write_document("users/u2", {"n": 2})
    await store.write_document("users/u1/logs/2024-01-01", {"calories": 1})
    assert await store.list_documents("users") == {"u1": {"n": 1}, "u2": {"n": 2}}
    assert await store.list_documents("users/u1/logs") == {"2024-01-01": {"calories": 1}}
    with pytest.raises(ValueError):
        await store.list_documents("users/u1")


@pytest.mark.asyncio
async def test_subscribe_document_delivers_changes_until_cancelled(store: SqlDocumentStore) -> None:
    seen: list = []
    sub = store.subscribe("profile/main", seen.append)
    await eventually(lambda: len(seen) == 1)
    assert seen == [None]

    await store.write_document("profile/main", {"name": "Sam"})
    await eventually(lambda: len(seen) == 2)
    assert seen[-1] == {"name": "Sam"}

    await sub.aclose()
    assert not sub.active
    await store.write_document("profile/main", {"name": "Alex"})
    await asyncio.sleep(0.05)
    assert len(seen) == 2


@pytest.mark.asyncio
async def test_subscribe_collection_with_async_callback(store: SqlDocumentStore) -> None:
    seen: list = []

    async def on_change(docs):
        seen.append(docs)

    sub = store.subscribe("logs", on_change)
    await eventually(lambda: seen == [{}])
    await store.write_document("logs/2024-01-02", {"sleep": 8})
    await eventually(lambda: len(seen) == 2)
    assert seen[-1] == {"2024-01-02": {"sleep": 8}}
    sub.cancel()


@pytest.mark.asyncio
async def test_subscription_survives_read_errors(store: SqlDocumentStore, monkeypatch: pytest.MonkeyPatch) -> None:
    calls = {"n": 0}
    real = store.read_document

    async def flaky(path):
        calls["n"] += 1
        if calls["n"] == 1:
            raise RuntimeError("db down")
        return await real(path)

    monkeypatch.setattr(store, "read_document", flaky)
    seen: list = []
    sub = store.subscribe("profile/main", seen.append)
    await eventually(lambda: seen == [None])
    assert calls["n"] >= 2
    await sub.aclose()
