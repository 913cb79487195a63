from __future__ import annotations

import datetime as dt
import json
from typing import Any


def _default(obj: Any) -> Any:
    if isinstance(obj, (dt.datetime, dt.date)):
        return obj.isoformat()
    if isinstance(obj, (set, frozenset)):
        return sorted(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def dumps(obj: Any) -> str:
    return json.dumps(obj, ensure_ascii=False, separators=(",", ":"), default=_default)


def loads(s: str | None) -> Any:
    if not s:
        return None
    return json.loads(s)


def loads_object(s: str | None) -> dict[str, Any]:
    obj = loads(s)
    return obj if isinstance(obj, dict) else {}
