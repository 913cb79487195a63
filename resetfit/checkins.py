from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Any, Iterable

from resetfit.nutrition import to_number


logger = logging.getLogger(__name__)

# answers offered for the weekly pain question
PAIN_CHOICES: dict[int, str] = {
    1: "Minimal/None",
    3: "Mild Stiffness",
    5: "Moderate",
    7: "High",
}


@dataclass(frozen=True)
class WeeklyCheckin:
    week: int
    weight: Any = None
    waist: Any = None
    pain_level: Any = None
    notes: str | None = None
    recorded_at: str | None = None

    @classmethod
    def from_doc(cls, doc_id: str, doc: dict[str, Any]) -> "WeeklyCheckin":
        # the document id is the authority for the week, the body field is a copy
        return cls(
            week=int(doc_id),
            weight=doc.get("weight"),
            waist=doc.get("waist"),
            pain_level=doc.get("painLevel"),
            notes=doc.get("notes"),
            recorded_at=doc.get("date"),
        )

    def to_doc(self) -> dict[str, Any]:
        return {
            "weight": self.weight,
            "waist": self.waist,
            "painLevel": self.pain_level,
            "notes": self.notes,
            "date": self.recorded_at,
            "week": self.week,
        }


def new_checkin(week: int, measurements: dict[str, Any], *, now: dt.datetime | None = None) -> WeeklyCheckin:
    if week < 1:
        raise ValueError(f"program weeks start at 1, got {week}")
    ts = (now or dt.datetime.now(dt.timezone.utc)).isoformat()
    return WeeklyCheckin(
        week=week,
        weight=measurements.get("weight"),
        waist=measurements.get("waist"),
        pain_level=measurements.get("pain_level", measurements.get("painLevel")),
        notes=measurements.get("notes"),
        recorded_at=ts,
    )


def order_history(docs: dict[str, dict[str, Any]]) -> list[WeeklyCheckin]:
    """Check-ins sorted by week, whatever order the store returned them in."""
    out: list[WeeklyCheckin] = []
    for doc_id, doc in docs.items():
        try:
            out.append(WeeklyCheckin.from_doc(doc_id, doc))
        except (TypeError, ValueError):
            logger.warning("CHECKIN_SKIPPED: non-numeric week id %r", doc_id)
    out.sort(key=lambda c: c.week)
    return out


def weight_trend(history: Iterable[WeeklyCheckin]) -> list[tuple[str, float | None]]:
    return [(f"W{c.week}", to_number(c.weight)) for c in sorted(history, key=lambda c: c.week)]
