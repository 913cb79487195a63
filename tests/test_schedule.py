from __future__ import annotations

import dataclasses
import datetime as dt
from types import MappingProxyType

import pytest

from resetfit.program import PHASES, REST_SLOT, WORKOUTS, ProgramPhase, phase_id_for_week
from resetfit.schedule import resolve_program_day, sunday_weekday, week_number

from helpers import MONDAY


@pytest.mark.parametrize(
    "days,week",
    [(0, 1), (1, 1), (6, 1), (7, 2), (13, 2), (14, 3), (83, 12), (84, 13)],
)
def test_week_number_from_elapsed_days(days: int, week: int) -> None:
    day = resolve_program_day(MONDAY, MONDAY + dt.timedelta(days=days))
    assert day.day_index == days
    assert day.week == week
    assert week_number(days) == week


@pytest.mark.parametrize(
    "week,phase_id",
    [(1, "phase1"), (4, "phase1"), (5, "phase2"), (8, "phase2"), (9, "phase3"), (12, "phase3"), (13, "phase3"), (30, "phase3")],
)
def test_phase_for_week(week: int, phase_id: str) -> None:
    day = resolve_program_day(MONDAY, MONDAY + dt.timedelta(days=(week - 1) * 7))
    assert day.week == week
    assert day.phase_id == phase_id
    assert day.phase is PHASES[phase_id]


def test_first_day_monday_is_workout_a() -> None:
    day = resolve_program_day(MONDAY, MONDAY)
    assert day.weekday == 1
    assert day.slot.code == "A"
    assert day.slot.kind == "strength"
    assert [e.name for e in day.exercises][:2] == ["Goblet Squats", "Bench Press"]


def test_today_before_start_counts_as_day_zero() -> None:
    day = resolve_program_day(MONDAY, MONDAY - dt.timedelta(days=10))
    assert day.day_index == 0
    assert day.week == 1
    assert day.phase_id == "phase1"


def test_missing_start_date_defaults_to_week_one() -> None:
    day = resolve_program_day(None, dt.date(2025, 6, 4))
    assert day.week == 1
    assert day.phase_id == "phase1"


def test_weekday_follows_the_calendar() -> None:
    wednesday = MONDAY + dt.timedelta(days=2)
    day = resolve_program_day(wednesday, wednesday)
    assert day.day_index == 0
    assert day.weekday == 3
    assert day.slot.code == "B"


def test_program_anchor_starts_on_monday_slot() -> None:
    wednesday = MONDAY + dt.timedelta(days=2)
    first = resolve_program_day(wednesday, wednesday, anchor="program")
    assert first.weekday == 1
    assert first.slot.code == "A"
    seventh = resolve_program_day(wednesday, wednesday + dt.timedelta(days=6), anchor="program")
    assert seventh.weekday == 0
    assert seventh.slot.code == "REST"


def test_sunday_weekday() -> None:
    assert sunday_weekday(dt.date(2023, 12, 31)) == 0
    assert sunday_weekday(MONDAY) == 1
    assert sunday_weekday(dt.date(2024, 1, 6)) == 6


def test_unknown_phase_falls_back_to_rest_without_exercises() -> None:
    day = resolve_program_day(MONDAY, MONDAY, phases=MappingProxyType({}))
    assert day.phase is None
    assert day.slot is REST_SLOT
    assert day.exercises == ()
    assert day.is_fallback


def test_missing_weekday_entry_falls_back_to_rest() -> None:
    sparse = ProgramPhase("phase1", "Foundation", "", (1, 4), MappingProxyType({}))
    day = resolve_program_day(MONDAY, MONDAY, phases=MappingProxyType({"phase1": sparse}))
    assert day.phase is sparse
    assert day.slot is REST_SLOT
    assert day.exercises == ()


def test_progress_pct_is_clamped() -> None:
    assert resolve_program_day(MONDAY, MONDAY).progress_pct == pytest.approx(100 / 12)
    assert resolve_program_day(MONDAY, MONDAY + dt.timedelta(days=200)).progress_pct == 100.0


def test_catalog_is_complete_and_read_only() -> None:
    for phase in PHASES.values():
        assert sorted(phase.schedule) == list(range(7))
        for slot in phase.schedule.values():
            assert slot.code in WORKOUTS
    with pytest.raises(TypeError):
        PHASES["phase4"] = PHASES["phase1"]  # type: ignore[index]
    with pytest.raises(dataclasses.FrozenInstanceError):
        PHASES["phase1"].display_name = "x"  # type: ignore[misc]


def test_catalog_links_attached_by_name() -> None:
    goblet = WORKOUTS["A"][0]
    assert goblet.link and goblet.link.startswith("https://exrx.net/")
    assert WORKOUTS["C1"][0].link is None


@pytest.mark.parametrize(
    "week,phase_id",
    [(0, "phase1"), (1, "phase1"), (4, "phase1"), (5, "phase2"), (8, "phase2"), (9, "phase3"), (12, "phase3"), (13, "phase3")],
)
def test_phase_id_follows_phase_week_ranges(week: int, phase_id: str) -> None:
    assert phase_id_for_week(week) == phase_id


def test_phase_covers_its_week_range() -> None:
    phase2 = PHASES["phase2"]
    assert phase2.covers(5) and phase2.covers(8)
    assert not phase2.covers(4) and not phase2.covers(9)
