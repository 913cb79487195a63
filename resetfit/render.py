from __future__ import annotations

from typing import Iterable

from tabulate import tabulate

from resetfit.checkins import WeeklyCheckin
from resetfit.nutrition import COMPLIANCE_LABELS, calorie_compliance, macros_line
from resetfit.program import PROGRAM_WEEKS
from resetfit.schedule import ProgramDay
from resetfit.tracker import DailyLog, exercise_progress


def status_line(day: ProgramDay) -> str:
    phase_name = day.phase.display_name if day.phase else "Program"
    return f"Week {day.week}/{PROGRAM_WEEKS} • {phase_name} • {day.progress_pct:.0f}%"


def workout_table(day: ProgramDay, log: DailyLog) -> str:
    if not day.exercises:
        return "No exercises scheduled."
    show_weights = day.slot.kind == "strength"
    show_links = any(ex.link for ex in day.exercises)
    rows = []
    for i, (ex, (done, total, finished)) in enumerate(zip(day.exercises, exercise_progress(log, day.exercises))):
        row = [i + 1, ex.name, f"{done}/{total}", ex.target_reps, "✓" if finished else ""]
        if show_weights:
            row.insert(4, log.weights.get(i, ""))
        if show_links:
            row.append(ex.link or "")
        rows.append(row)

    headers = ["#", "Exercise", "Sets", "Reps", "Done"]
    if show_weights:
        headers.insert(4, "Lbs")
    if show_links:
        headers.append("Link")
    return tabulate(rows, headers=headers, tablefmt="github")


def day_summary(day: ProgramDay, log: DailyLog) -> str:
    lines = [status_line(day), day.slot.display_name]
    if day.phase:
        lines.append(day.phase.description)
    lines.append("")
    lines.append(workout_table(day, log))
    lines.append("")
    lines.append(macros_line(log.calories, log.protein))
    lines.append(f"Compliance: {COMPLIANCE_LABELS[calorie_compliance(log.calories)]}")
    return "\n".join(lines)


def checkin_table(history: Iterable[WeeklyCheckin]) -> str:
    rows = [
        [
            f"Week {c.week}",
            (c.recorded_at or "")[:10],
            c.weight if c.weight is not None else "--",
            c.waist if c.waist is not None else "--",
            f"{c.pain_level}/10" if c.pain_level is not None else "--",
        ]
        for c in history
    ]
    if not rows:
        return "No check-ins yet."
    return tabulate(rows, headers=["Week", "Date", "Weight (lbs)", "Waist (in)", "Pain"], tablefmt="github")
