from __future__ import annotations

import asyncio
import datetime as dt
from typing import Callable


# 2024-01-01 is a Monday
MONDAY = dt.date(2024, 1, 1)


async def eventually(pred: Callable[[], bool], timeout: float = 2.0) -> None:
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not pred():
        if loop.time() > deadline:
            raise AssertionError("condition not reached in time")
        await asyncio.sleep(0.01)
