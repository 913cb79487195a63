from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from resetfit.db import engine as default_engine
from resetfit.models import Base


async def init_db(engine: AsyncEngine | None = None) -> None:
    eng = engine or default_engine
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        if eng.dialect.name == "sqlite":
            await conn.execute(text("PRAGMA journal_mode=WAL;"))
            await conn.execute(text("PRAGMA synchronous=NORMAL;"))
