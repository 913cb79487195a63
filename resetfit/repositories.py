from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Any

from resetfit.checkins import WeeklyCheckin, order_history
from resetfit.config import settings
from resetfit.store import DocumentStore, join_path
from resetfit.tracker import DailyLog


logger = logging.getLogger(__name__)


def user_root(uid: str, app_id: str | None = None) -> str:
    return join_path("artifacts", app_id or settings.app_id, "users", uid)


def _parse_date(value: Any) -> dt.date | None:
    if isinstance(value, dt.date):
        return value
    if not value:
        return None
    try:
        return dt.date.fromisoformat(str(value)[:10])
    except ValueError:
        return None


@dataclass(frozen=True)
class UserProfile:
    name: str
    start_date: dt.date | None
    start_weight: str | None = None
    goals: str | None = None
    created_at: str | None = None

    @classmethod
    def from_doc(cls, doc: dict[str, Any]) -> "UserProfile":
        sw = doc.get("startWeight")
        return cls(
            name=str(doc.get("name") or ""),
            start_date=_parse_date(doc.get("startDate")),
            start_weight=None if sw is None else str(sw),
            goals=doc.get("goals"),
            created_at=doc.get("createdAt"),
        )

    def to_doc(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "startDate": self.start_date.isoformat() if self.start_date else None,
            "startWeight": self.start_weight,
            "goals": self.goals,
            "createdAt": self.created_at,
        }


class ProfileRepo:
    def __init__(self, store: DocumentStore, root: str):
        self.store = store
        self.path = join_path(root, "profile", "main")

    async def get(self) -> UserProfile | None:
        try:
            doc = await self.store.read_document(self.path)
        except Exception:
            logger.exception("PROFILE_READ_ERROR: %s", self.path)
            return None
        return UserProfile.from_doc(doc) if doc else None

    async def save(self, profile: UserProfile) -> bool:
        try:
            await self.store.write_document(self.path, profile.to_doc(), merge=False)
        except Exception:
            logger.exception("PROFILE_WRITE_ERROR: %s", self.path)
            return False
        return True


class DailyLogRepo:
    def __init__(self, store: DocumentStore, root: str):
        self.store = store
        self.collection = join_path(root, "logs")

    def path_for(self, date: str) -> str:
        return join_path(self.collection, date)

    async def all(self) -> dict[str, DailyLog]:
        try:
            docs = await self.store.list_documents(self.collection)
        except Exception:
            logger.exception("LOG_READ_ERROR: %s", self.collection)
            return {}
        return {k: DailyLog.from_doc(k, v) for k, v in docs.items()}

    async def merge(self, date: str, fields: dict[str, Any]) -> bool:
        try:
            await self.store.write_document(self.path_for(date), fields, merge=True)
        except Exception:
            logger.exception("LOG_WRITE_ERROR: %s fields=%s", date, sorted(fields))
            return False
        return True


class CheckinRepo:
    def __init__(self, store: DocumentStore, root: str):
        self.store = store
        self.collection = join_path(root, "checkins")

    def path_for(self, week: int) -> str:
        return join_path(self.collection, str(week))

    async def put(self, checkin: WeeklyCheckin) -> bool:
        # one document per week; a resubmission replaces it entirely
        try:
            await self.store.write_document(self.path_for(checkin.week), checkin.to_doc(), merge=False)
        except Exception:
            logger.exception("CHECKIN_WRITE_ERROR: week %s", checkin.week)
            return False
        return True

    async def history(self) -> list[WeeklyCheckin]:
        try:
            docs = await self.store.list_documents(self.collection)
        except Exception:
            logger.exception("CHECKIN_READ_ERROR: %s", self.collection)
            return []
        return order_history(docs)
