from __future__ import annotations

import datetime as dt
import logging
from typing import Any, Callable
from zoneinfo import ZoneInfo

from resetfit import tracker
from resetfit.checkins import WeeklyCheckin, new_checkin, order_history, weight_trend
from resetfit.config import settings
from resetfit.identity import AnonymousIdentity
from resetfit.nutrition import Compliance, calorie_compliance
from resetfit.repositories import CheckinRepo, DailyLogRepo, ProfileRepo, UserProfile, user_root
from resetfit.schedule import ProgramDay, WeekdayAnchor, resolve_program_day
from resetfit.store import DocumentStore, Subscription
from resetfit.tracker import DailyLog


logger = logging.getLogger(__name__)

DEFAULT_GOALS = "Lose weight, reduce back pain"


def _stamp_time(value: str | None) -> dt.datetime | None:
    if not value:
        return None
    try:
        ts = dt.datetime.fromisoformat(value)
    except ValueError:
        return None
    return ts if ts.tzinfo else ts.replace(tzinfo=dt.timezone.utc)


def _is_newer(remote: str | None, local: str | None) -> bool:
    theirs, ours = _stamp_time(remote), _stamp_time(local)
    if ours is None:
        return True
    if theirs is None:
        return False
    return theirs > ours


class ProgramTracker:
    """
    Session state for one user: profile, daily logs and check-ins.

    Mutations update the in-memory state first and then write to the store.
    A failed write is logged and the in-memory state is kept as is; the next
    sync snapshot from the store replaces it.
    """

    def __init__(
        self,
        store: DocumentStore,
        identity: AnonymousIdentity | None = None,
        *,
        app_id: str | None = None,
        tz_name: str | None = None,
        anchor: WeekdayAnchor | None = None,
        clock: Callable[[], dt.datetime] | None = None,
    ):
        self.store = store
        self.identity = identity or AnonymousIdentity()
        self.app_id = app_id or settings.app_id
        self.tz = ZoneInfo(tz_name or settings.tz_name)
        self.anchor: WeekdayAnchor = anchor or settings.weekday_anchor
        self._clock = clock

        self.uid: str | None = None
        self.profile: UserProfile | None = None
        self.logs: dict[str, DailyLog] = {}
        self.checkins: list[WeeklyCheckin] = []

        self.profiles: ProfileRepo | None = None
        self.daily: DailyLogRepo | None = None
        self.checkin_repo: CheckinRepo | None = None
        self._subs: list[Subscription] = []

    # --- session ---

    @property
    def read_only(self) -> bool:
        return self.uid is None

    @property
    def needs_setup(self) -> bool:
        return self.profile is None

    async def start(self) -> None:
        uid = await self.identity.sign_in()
        if uid is None:
            logger.error("AUTH_ERROR: no user identity, running read-only")
            return
        self.uid = uid
        root = user_root(uid, self.app_id)
        self.profiles = ProfileRepo(self.store, root)
        self.daily = DailyLogRepo(self.store, root)
        self.checkin_repo = CheckinRepo(self.store, root)
        await self.refresh()

    async def refresh(self) -> None:
        if self.profiles is None or self.daily is None or self.checkin_repo is None:
            return
        self.profile = await self.profiles.get()
        self.logs = await self.daily.all()
        self.checkins = await self.checkin_repo.history()

    def start_sync(self) -> None:
        if self.profiles is None or self.daily is None or self.checkin_repo is None:
            logger.error("SYNC_SKIPPED: no user identity")
            return
        if self._subs:
            return
        self._subs = [
            self.store.subscribe(self.profiles.path, self._on_profile),
            self.store.subscribe(self.daily.collection, self._on_logs),
            self.store.subscribe(self.checkin_repo.collection, self._on_checkins),
        ]

    async def stop_sync(self) -> None:
        subs, self._subs = self._subs, []
        for s in subs:
            await s.aclose()

    def _on_profile(self, doc: dict[str, Any] | None) -> None:
        self.profile = UserProfile.from_doc(doc) if doc else None

    def _on_logs(self, docs: dict[str, dict[str, Any]]) -> None:
        # a snapshot may have been read before a local write landed; per date the
        # newer updatedAt wins and a tie keeps the local log
        merged: dict[str, DailyLog] = {}
        for key in set(self.logs) | set(docs):
            local = self.logs.get(key)
            if key not in docs:
                if local is not None and local.updated_at:
                    merged[key] = local
                continue
            remote = DailyLog.from_doc(key, docs[key])
            if local is not None and not _is_newer(remote.updated_at, local.updated_at):
                merged[key] = local
            else:
                merged[key] = remote
        self.logs = merged

    def _on_checkins(self, docs: dict[str, dict[str, Any]]) -> None:
        self.checkins = order_history(docs)

    # --- clock ---

    def now(self) -> dt.datetime:
        if self._clock is not None:
            return self._clock()
        return dt.datetime.now(self.tz)

    def today(self) -> dt.date:
        return self.now().date()

    def date_key(self, day: dt.date | None = None) -> str:
        return (day or self.today()).isoformat()

    # --- reads ---

    def program_day(self, day: dt.date | None = None) -> ProgramDay:
        start = self.profile.start_date if self.profile else None
        return resolve_program_day(start, day or self.today(), anchor=self.anchor)

    def day_log(self, day: dt.date | None = None) -> DailyLog:
        key = self.date_key(day)
        return self.logs.get(key) or DailyLog(date=key)

    def compliance(self, day: dt.date | None = None) -> Compliance:
        return calorie_compliance(self.day_log(day).calories)

    def weight_trend(self) -> list[tuple[str, float | None]]:
        return weight_trend(self.checkins)

    # --- writes ---

    async def setup_profile(
        self,
        *,
        name: str,
        start_date: dt.date,
        start_weight: Any,
        goals: str = DEFAULT_GOALS,
    ) -> UserProfile | None:
        if self.profiles is None:
            logger.error("PROFILE_WRITE_SKIPPED: no user identity, cannot save profile")
            return None
        profile = UserProfile(
            name=name,
            start_date=start_date,
            start_weight=None if start_weight is None else str(start_weight),
            goals=goals,
            created_at=self.now().isoformat(),
        )
        self.profile = profile
        await self.profiles.save(profile)
        return profile

    async def toggle_set(self, exercise_index: int, set_index: int) -> DailyLog:
        log = self.day_log()
        if self.daily is None:
            logger.error("LOG_WRITE_SKIPPED: no user identity")
            return log
        day = self.program_day()
        updated = tracker.toggle_set(log, day.exercises, exercise_index, set_index, now=self._stamp())
        await self._apply(updated, ("setsCompleted", "completedExercises"))
        return updated

    async def record_field(self, field_name: str, value: Any) -> DailyLog:
        log = self.day_log()
        if self.daily is None:
            logger.error("LOG_WRITE_SKIPPED: no user identity")
            return log
        updated = tracker.record_field(log, field_name, value, now=self._stamp())
        doc_field = "painLevel" if field_name in ("pain_level", "painLevel") else field_name
        await self._apply(updated, (doc_field,))
        return updated

    async def record_weight(self, exercise_index: int, value: Any) -> DailyLog:
        log = self.day_log()
        if self.daily is None:
            logger.error("LOG_WRITE_SKIPPED: no user identity")
            return log
        updated = tracker.record_weight(log, exercise_index, value, now=self._stamp())
        await self._apply(updated, ("weights",))
        return updated

    async def submit_checkin(self, measurements: dict[str, Any], week: int | None = None) -> WeeklyCheckin | None:
        if self.checkin_repo is None:
            logger.error("CHECKIN_WRITE_SKIPPED: no user identity")
            return None
        checkin = new_checkin(week if week is not None else self.program_day().week, measurements, now=self.now())
        self.checkins = sorted(
            [c for c in self.checkins if c.week != checkin.week] + [checkin],
            key=lambda c: c.week,
        )
        await self.checkin_repo.put(checkin)
        return checkin

    def _stamp(self) -> str:
        return self.now().astimezone(dt.timezone.utc).isoformat()

    async def _apply(self, log: DailyLog, doc_fields: tuple[str, ...]) -> bool:
        self.logs[log.date] = log
        if self.daily is None:
            logger.error("LOG_WRITE_SKIPPED: no user identity")
            return False
        doc = log.to_doc()
        fields = {k: doc[k] for k in doc_fields}
        fields["updatedAt"] = doc["updatedAt"]
        return await self.daily.merge(log.date, fields)
