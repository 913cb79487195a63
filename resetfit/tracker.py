from __future__ import annotations

import datetime as dt
import re
from dataclasses import dataclass, field, replace
from typing import Any, Sequence

from resetfit.program import ExerciseSpec


_LEADING_INT = re.compile(r"^\d+")

# accepted field names -> DailyLog attribute
_SCALAR_FIELDS = {
    "calories": "calories",
    "protein": "protein",
    "pain_level": "pain_level",
    "painLevel": "pain_level",
    "sleep": "sleep",
}


def _utcnow_iso() -> str:
    return dt.datetime.now(dt.timezone.utc).isoformat()


def _int_keys(obj: Any) -> dict[int, Any]:
    out: dict[int, Any] = {}
    if not isinstance(obj, dict):
        return out
    for k, v in obj.items():
        try:
            out[int(k)] = v
        except (TypeError, ValueError):
            continue
    return out


@dataclass(frozen=True)
class DailyLog:
    date: str  # ISO date, also the document id
    calories: Any = None
    protein: Any = None
    pain_level: Any = None
    sleep: Any = None
    sets_completed: dict[int, tuple[bool, ...]] = field(default_factory=dict)
    completed_exercises: tuple[int, ...] = ()
    weights: dict[int, str] = field(default_factory=dict)
    updated_at: str | None = None

    @classmethod
    def from_doc(cls, date: str, doc: dict[str, Any] | None) -> "DailyLog":
        if not doc:
            return cls(date=date)
        sets = {i: tuple(bool(x) for x in v) for i, v in _int_keys(doc.get("setsCompleted")).items() if isinstance(v, list)}
        completed: list[int] = []
        for x in doc.get("completedExercises") or []:
            try:
                i = int(x)
            except (TypeError, ValueError):
                continue
            if i not in completed:
                completed.append(i)
        weights = {i: "" if v is None else str(v) for i, v in _int_keys(doc.get("weights")).items()}
        return cls(
            date=date,
            calories=doc.get("calories"),
            protein=doc.get("protein"),
            pain_level=doc.get("painLevel"),
            sleep=doc.get("sleep"),
            sets_completed=sets,
            completed_exercises=tuple(completed),
            weights=weights,
            updated_at=doc.get("updatedAt"),
        )

    def to_doc(self) -> dict[str, Any]:
        return {
            "calories": self.calories,
            "protein": self.protein,
            "painLevel": self.pain_level,
            "sleep": self.sleep,
            "setsCompleted": {str(i): list(v) for i, v in sorted(self.sets_completed.items())},
            "completedExercises": list(self.completed_exercises),
            "weights": {str(i): v for i, v in sorted(self.weights.items())},
            "updatedAt": self.updated_at,
        }

    def is_exercise_done(self, exercise_index: int) -> bool:
        return exercise_index in self.completed_exercises


def resolve_set_count(spec: ExerciseSpec | int | str) -> int:
    """Number of trackable sets; non-numeric descriptors count as their leading integer or 1."""
    value = spec.target_sets if isinstance(spec, ExerciseSpec) else spec
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    m = _LEADING_INT.match(str(value))
    return int(m.group(0)) if m else 1


def set_states(log: DailyLog, exercise_index: int, count: int) -> list[bool]:
    stored = log.sets_completed.get(exercise_index)
    if stored is None or len(stored) < count:
        return [False] * count
    return list(stored[:count])


def toggle_set(
    log: DailyLog,
    exercises: Sequence[ExerciseSpec],
    exercise_index: int,
    set_index: int,
    *,
    now: str | None = None,
) -> DailyLog:
    """
    Flip one set and bring ``completed_exercises`` back in line with it.

    An exercise is listed as completed exactly when all of its sets are done.
    Returns a new log; ``log`` is not modified.
    """
    if not 0 <= exercise_index < len(exercises):
        raise IndexError(f"exercise index {exercise_index} out of range (0..{len(exercises) - 1})")
    count = resolve_set_count(exercises[exercise_index])
    if not 0 <= set_index < count:
        raise IndexError(f"set index {set_index} out of range for {exercises[exercise_index].name!r} ({count} sets)")

    states = set_states(log, exercise_index, count)
    states[set_index] = not states[set_index]
    all_done = all(states)

    completed = list(log.completed_exercises)
    if all_done and exercise_index not in completed:
        completed.append(exercise_index)
    elif not all_done and exercise_index in completed:
        completed = [i for i in completed if i != exercise_index]

    sets = dict(log.sets_completed)
    sets[exercise_index] = tuple(states)
    return replace(
        log,
        sets_completed=sets,
        completed_exercises=tuple(completed),
        updated_at=now or _utcnow_iso(),
    )


def record_field(log: DailyLog, field_name: str, value: Any, *, now: str | None = None) -> DailyLog:
    # values are stored as entered, no range checks
    attr = _SCALAR_FIELDS.get(field_name)
    if attr is None:
        raise ValueError(f"unknown daily log field: {field_name!r}")
    return replace(log, **{attr: value, "updated_at": now or _utcnow_iso()})


def record_weight(log: DailyLog, exercise_index: int, value: Any, *, now: str | None = None) -> DailyLog:
    weights = dict(log.weights)
    weights[exercise_index] = "" if value is None else str(value)
    return replace(log, weights=weights, updated_at=now or _utcnow_iso())


def exercise_progress(log: DailyLog, exercises: Sequence[ExerciseSpec]) -> list[tuple[int, int, bool]]:
    """(sets done, sets total, exercise done) for every exercise of the day."""
    out: list[tuple[int, int, bool]] = []
    for i, ex in enumerate(exercises):
        count = resolve_set_count(ex)
        states = set_states(log, i, count)
        out.append((sum(states), count, log.is_exercise_done(i)))
    return out
