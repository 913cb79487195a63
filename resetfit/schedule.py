from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Literal, Mapping

from resetfit.program import (
    PHASES,
    PROGRAM_WEEKS,
    REST_SLOT,
    ExerciseSpec,
    ProgramPhase,
    WorkoutSlot,
    exercises_for,
    phase_id_for_week,
)


WeekdayAnchor = Literal["calendar", "program"]


@dataclass(frozen=True)
class ProgramDay:
    day_index: int  # whole days since start, never negative
    week: int  # 1-based
    phase_id: str
    phase: ProgramPhase | None
    weekday: int  # 0=Sunday .. 6=Saturday
    slot: WorkoutSlot
    exercises: tuple[ExerciseSpec, ...]

    @property
    def is_fallback(self) -> bool:
        return self.phase is None or self.slot is REST_SLOT

    @property
    def progress_pct(self) -> float:
        return min(100.0, max(0.0, self.week / PROGRAM_WEEKS * 100))


def sunday_weekday(d: dt.date) -> int:
    # date.weekday() is 0=Monday; the schedule is keyed 0=Sunday
    return (d.weekday() + 1) % 7


def elapsed_days(start: dt.date, today: dt.date) -> int:
    return max(0, (today - start).days)


def week_number(days: int) -> int:
    return max(0, days) // 7 + 1


def resolve_program_day(
    start: dt.date | None,
    today: dt.date,
    *,
    anchor: WeekdayAnchor = "calendar",
    phases: Mapping[str, ProgramPhase] = PHASES,
) -> ProgramDay:
    """
    Map (program start, today) to the program week, phase and workout.

    Never raises: a missing start date resolves to day 0 of week 1, and a
    missing phase or weekday entry resolves to REST_SLOT with no exercises.
    """
    days = elapsed_days(start, today) if start is not None else 0
    week = week_number(days)
    pid = phase_id_for_week(week)

    if anchor == "program":
        # program day 0 is Monday
        weekday = (days % 7 + 1) % 7
    else:
        weekday = sunday_weekday(today)

    phase = phases.get(pid)
    slot = phase.schedule.get(weekday) if phase is not None else None
    if slot is None:
        return ProgramDay(
            day_index=days,
            week=week,
            phase_id=pid,
            phase=phase,
            weekday=weekday,
            slot=REST_SLOT,
            exercises=(),
        )

    return ProgramDay(
        day_index=days,
        week=week,
        phase_id=pid,
        phase=phase,
        weekday=weekday,
        slot=slot,
        exercises=exercises_for(slot.code),
    )
