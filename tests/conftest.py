from __future__ import annotations

import datetime as dt
from typing import Callable

import pytest
import pytest_asyncio

from resetfit.db import make_engine, make_sessionmaker, sqlite_url
from resetfit.init_db import init_db
from resetfit.store import SqlDocumentStore


@pytest_asyncio.fixture
async def db_sessions(tmp_path):
    eng = make_engine(sqlite_url(str(tmp_path / "test.sqlite3")))
    await init_db(eng)
    yield make_sessionmaker(eng)
    await eng.dispose()


@pytest_asyncio.fixture
async def store(db_sessions) -> SqlDocumentStore:
    return SqlDocumentStore(db_sessions, poll_interval_s=0.01)


@pytest.fixture
def fixed_clock() -> Callable[[], dt.datetime]:
    return lambda: dt.datetime(2024, 1, 1, 9, 30, tzinfo=dt.timezone.utc)
