"""
The 12-week Reset Program: three 4-week phases, a weekly schedule per phase,
and the exercise list behind every workout code.

Everything here is built once at import and is read-only afterwards.
Weekday keys use 0=Sunday .. 6=Saturday.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal, Mapping


SlotKind = Literal["strength", "cardio", "active_recovery", "rest"]

PROGRAM_WEEKS = 12


@dataclass(frozen=True)
class WorkoutSlot:
    kind: SlotKind
    code: str
    display_name: str


@dataclass(frozen=True)
class ExerciseSpec:
    name: str
    target_sets: int | str
    target_reps: str
    note: str = ""
    link: str | None = None


@dataclass(frozen=True)
class ProgramPhase:
    id: str
    display_name: str
    description: str
    week_range: tuple[int, int]
    schedule: Mapping[int, WorkoutSlot] = field(default_factory=lambda: MappingProxyType({}))

    def covers(self, week: int) -> bool:
        start, end = self.week_range
        return start <= week <= end


REST_SLOT = WorkoutSlot("rest", "REST", "Rest / Active Recovery")


def _schedule(days: dict[int, WorkoutSlot]) -> Mapping[int, WorkoutSlot]:
    return MappingProxyType(dict(days))


PHASES: Mapping[str, ProgramPhase] = MappingProxyType(
    {
        "phase1": ProgramPhase(
            id="phase1",
            display_name="Foundation",
            description="Building base strength, core stability, and habit formation.",
            week_range=(1, 4),
            schedule=_schedule(
                {
                    1: WorkoutSlot("strength", "A", "Workout A: Squat, Push, Core"),
                    2: WorkoutSlot("cardio", "C1", "Cardio & Mobility"),
                    3: WorkoutSlot("strength", "B", "Workout B: Hinge, Pull, Core"),
                    4: WorkoutSlot("cardio", "C2", "Rowing/Cardio & Posture"),
                    5: WorkoutSlot("strength", "C", "Workout C: Active Core & Rehab"),
                    6: WorkoutSlot("active_recovery", "R1", "Active Recovery"),
                    0: WorkoutSlot("rest", "REST", "Rest & Weekly Check-in"),
                }
            ),
        ),
        "phase2": ProgramPhase(
            id="phase2",
            display_name="Performance",
            description="Increasing intensity, heavier weights, and interval cardio.",
            week_range=(5, 8),
            schedule=_schedule(
                {
                    1: WorkoutSlot("strength", "D", "Lower Body Strength"),
                    2: WorkoutSlot("cardio", "C3", "Interval Cardio (HIIT)"),
                    3: WorkoutSlot("strength", "E", "Upper Body Strength"),
                    4: WorkoutSlot("rest", "REST", "Rest / Light Mobility"),
                    5: WorkoutSlot("strength", "F", "Full Body Power & Core"),
                    6: WorkoutSlot("cardio", "C4", "Steady State Endurance"),
                    0: WorkoutSlot("rest", "REST", "Rest & Weekly Check-in"),
                }
            ),
        ),
        "phase3": ProgramPhase(
            id="phase3",
            display_name="Refinement",
            description="Peaking performance, testing maxes, and fine-tuning.",
            week_range=(9, 12),
            schedule=_schedule(
                {
                    1: WorkoutSlot("strength", "G", "Heavy Lower / Full Body"),
                    2: WorkoutSlot("cardio", "C5", "Cardio Challenge"),
                    3: WorkoutSlot("strength", "H", "Heavy Upper / Push-Pull"),
                    4: WorkoutSlot("rest", "REST", "Rest / Mobility"),
                    5: WorkoutSlot("strength", "I", "Functional Core & Stability"),
                    6: WorkoutSlot("active_recovery", "R2", "Active Recovery"),
                    0: WorkoutSlot("rest", "REST", "Final Assessment / Check-in"),
                }
            ),
        ),
    }
)


_EXRX = "https://exrx.net"

EXERCISE_LINKS: Mapping[str, str] = MappingProxyType(
    {
        "Goblet Squats": f"{_EXRX}/WeightExercises/Quadriceps/DBGobletSquat",
        "Bench Press": f"{_EXRX}/WeightExercises/Pectoral/BBBenchPress",
        "Bent-Over Rows": f"{_EXRX}/WeightExercises/BackGeneral/BBBentOverRow",
        "Plank Holds": f"{_EXRX}/WeightExercises/RectusAbdominis/Plank",
        "Dead Bugs": f"{_EXRX}/WeightExercises/RectusAbdominis/DeadBug",
        "Chin Tucks": f"{_EXRX}/WeightExercises/Sternocleidomastoid/ChinTuck",
        "Romanian Deadlifts": f"{_EXRX}/WeightExercises/OlympicLifts/RomanianDeadlift",
        "Lat Pulldowns/TRX": f"{_EXRX}/WeightExercises/LatissimusDorsi/CGLatPulldown",
        "Lunges/Step-Ups": f"{_EXRX}/WeightExercises/Quadriceps/DBSplitSquat",
        "Side Planks": f"{_EXRX}/WeightExercises/Obliques/SidePlank",
        "Bird-Dogs": f"{_EXRX}/WeightExercises/ErectorSpinae/BirdDog",
        "McGill Curl-Up": f"{_EXRX}/WeightExercises/RectusAbdominis/ModifiedCurlUp",
        "Glute Bridges": f"{_EXRX}/WeightExercises/GluteusMaximus/BWSingleLegHipExtension",
        "Band Pull-Aparts": f"{_EXRX}/WeightExercises/RearDelt/BandPullApart",
        "Back Extensions": f"{_EXRX}/WeightExercises/ErectorSpinae/BW45BackExtension",
        "Barbell/Goblet Squat": f"{_EXRX}/WeightExercises/Quadriceps/BBBackSquat",
        "Walking Lunges": f"{_EXRX}/WeightExercises/Quadriceps/DBWalkingLunge",
        "Hip Thrusts": f"{_EXRX}/WeightExercises/GluteusMaximus/BBHipThrust",
        "Farmers Carries": f"{_EXRX}/WeightExercises/Grip/DBFarmersWalk",
        "Pull-Ups/Hvy Pulldown": f"{_EXRX}/WeightExercises/LatissimusDorsi/BWPullup",
        "Overhead Press": f"{_EXRX}/WeightExercises/DeltoidAnterior/BBOverheadPress",
        "DB Rows": f"{_EXRX}/WeightExercises/BackGeneral/DBOneArmRow",
        "Hanging Knee Raise": f"{_EXRX}/WeightExercises/RectusAbdominis/HangingKneeRaise",
        "Kettlebell Swings": f"{_EXRX}/WeightExercises/HipExtensor/KBSwing",
        "Push-Ups": f"{_EXRX}/WeightExercises/Pectoral/BWPushup",
        "TRX Rows": f"{_EXRX}/WeightExercises/BackGeneral/SuspendedRow",
        "Bodyweight Squats": f"{_EXRX}/WeightExercises/Quadriceps/BWSquat",
        "Squat Variation": f"{_EXRX}/WeightExercises/Quadriceps/BBBackSquat",
        "Deadlift Variation": f"{_EXRX}/WeightExercises/ErectorSpinae/BBDeadlift",
        "Bulgarian Split Squat": f"{_EXRX}/WeightExercises/Quadriceps/DBBulgarianSplitSquat",
        "Weighted Plank": f"{_EXRX}/WeightExercises/RectusAbdominis/WeightedPlank",
        "Incline DB Press": f"{_EXRX}/WeightExercises/Pectoral/DBInclinePress",
        "Face Pulls": f"{_EXRX}/WeightExercises/RearDelt/CFHighRow",
        "Turkish Get-Ups": f"{_EXRX}/WeightExercises/MultipleJoint/KBTurkishGetUp",
        "Single-Arm Carry": f"{_EXRX}/WeightExercises/Grip/DBSuitcaseCarry",
        "Ab Wheel/Fallouts": f"{_EXRX}/WeightExercises/RectusAbdominis/AbRollout",
        "Foam Roll Thoracic": f"{_EXRX}/Rehab/FoamRoll/ThoracicSpine",
        "Wall Angels": f"{_EXRX}/WeightExercises/Scapular/BWWallSlide",
        "Scapular Retractions": f"{_EXRX}/WeightExercises/Scapular/BWProneHorizontalAbduction",
    }
)


def _ex(name: str, sets: int | str, reps: str, note: str = "") -> ExerciseSpec:
    return ExerciseSpec(name=name, target_sets=sets, target_reps=reps, note=note, link=EXERCISE_LINKS.get(name))


WORKOUTS: Mapping[str, tuple[ExerciseSpec, ...]] = MappingProxyType(
    {
        # phase 1: foundation
        "A": (
            _ex("Goblet Squats", 3, "10-12", "Focus on depth and form (~35 lbs)"),
            _ex("Bench Press", 3, "8-10", "Emphasize control (comfortable weight)"),
            _ex("Bent-Over Rows", 3, "10", "Squeeze shoulder blades (~60-70 lbs)"),
            _ex("Plank Holds", 3, "30-45s", "Core tight"),
            _ex("Dead Bugs", 3, "10/side", "Slow & controlled reps for core stability"),
            _ex("Chin Tucks", 2, "10-15", "Tuck chin straight back (5s hold) for posture"),
        ),
        "B": (
            _ex("Romanian Deadlifts", 3, "10", "Light weight/empty bar, feel hamstring stretch"),
            _ex("Lat Pulldowns/TRX", 3, "12", "To engage upper back"),
            _ex("Lunges/Step-Ups", 3, "8/leg", "Bodyweight/light weight for balance"),
            _ex("Side Planks", 3, "20-30s/side", "Focus on form and bracing"),
            _ex("Bird-Dogs", 3, "5/side", "5-sec hold each side, focusing on form"),
        ),
        "C": (
            _ex("McGill Curl-Up", 2, "Endurance", "Part of the Big Three Circuit (10s holds)"),
            _ex("Side Plank", 2, "Endurance", "Part of the Big Three Circuit (10s holds/side)"),
            _ex("Bird-Dog", 2, "Endurance", "Part of the Big Three Circuit (10s holds/side)"),
            _ex("Glute Bridges", 3, "12", "Squeeze glutes at top"),
            _ex("Band Pull-Aparts", 3, "15", "For posture (rhomboids/rear delts)"),
            _ex("Back Extensions", 3, "12", "Bodyweight only, keep pain levels in check"),
        ),
        "C1": (
            _ex("Brisk Walk/Jog", 1, "20-30 min", "Zone 2 effort (Can speak full sentences)"),
            _ex("Foam Roll Thoracic", 1, "5 min", "Upper back mobility"),
            _ex("Chin Tucks", 2, "10-15", "Daily posture practice"),
        ),
        "C2": (
            _ex("Rowing/Treadmill", 1, "20 min", "Moderate pace, focus on form"),
            _ex("Wall Angels", 2, "10", "Posture correction for rounded shoulders"),
            _ex("Scapular Retractions", 2, "12", "Activate mid-back muscles"),
        ),
        "R1": (
            _ex("Light Walk", 1, "30 min", "Active recovery (casual outdoor walk/cycle)"),
            _ex("Stretching", 1, "15 min", "Full body stretch (hips, chest, back)"),
        ),
        # phase 2: performance
        "D": (
            _ex("Barbell/Goblet Squat", 3, "6-8", "Heavier load, start light on Barbell Back Squats"),
            _ex("Walking Lunges", 3, "10/leg", "Weighted (dumbbells in hand)"),
            _ex("Hip Thrusts", 3, "10", "Barbell or heavy DB, squeeze glutes"),
            _ex("Farmers Carries", 3, "30s", "Heavy hold, challenge lateral core stability"),
        ),
        "E": (
            _ex("Bench Press", 3, "5-6", "Strength focus, RPE ~8-9 on last set"),
            _ex("Pull-Ups/Hvy Pulldown", 3, "Max/8-10", "Heavy vertical pull, strengthen lats"),
            _ex("Overhead Press", 3, "8", "Barbell or DB, build shoulder strength"),
            _ex("DB Rows", 3, "8/arm", "Heavier weight than Phase 1"),
            _ex("Hanging Knee Raise", 3, "10", "More dynamic core work"),
        ),
        # full-body circuit, 3 rounds
        "F": (
            _ex("Kettlebell Swings", 3, "15", "Circuit: Power/Hinge explosiveness"),
            _ex("Push-Ups", 3, "12", "Circuit: Perfect form"),
            _ex("TRX Rows", 3, "10", "Circuit: Control"),
            _ex("Bodyweight Squats", 3, "15", "Circuit: Speed/conditioning"),
            _ex("Plank w/ Reach", 3, "10/side", "Circuit: Anti-rotation finisher"),
        ),
        "C3": (_ex("HIIT Intervals", 1, "5-6 Rounds", "1 min hard (RPE 8) / 2 min recovery (walk/easy)"),),
        "C4": (_ex("Long Jog/Row", 1, "40 min", "Steady state endurance, RPE 6-7"),),
        # phase 3: refinement
        "G": (
            _ex("Squat Variation", 3, "5-8", "Near max effort (safe), refine technique"),
            _ex("Deadlift Variation", 3, "8-10", "Perfect form, controlled negative reps"),
            _ex("Bulgarian Split Squat", 3, "8/leg", "Focus on balance and unilateral strength"),
            _ex("Weighted Plank", 3, "45s", "Add small plate if core can handle it"),
        ),
        "H": (
            _ex("Bench Press", 3, "3-5", "Peak strength test (safely)"),
            _ex("Weighted Pull/Row", 3, "6-8", "Heavy back work (max sustainable load)"),
            _ex("Incline DB Press", 3, "8-10", "Address upper chest/shoulder balance"),
            _ex("Face Pulls", 3, "15", "Rear delt/posture health"),
        ),
        "I": (
            _ex("Turkish Get-Ups", 3, "3/side", "Functional stability and control"),
            _ex("Single-Arm Carry", 3, "30s/side", "Test anti-lateral flexion strength"),
            _ex("Ab Wheel/Fallouts", 3, "8-10", "Advanced anti-extension core work"),
            _ex("McGill Big 3", 1, "Circuit", "Quick maintenance/mobility routine"),
        ),
        "C5": (_ex("Cardio Challenge", 1, "Test", "Timed 1.5 Mile Run or 12 Min Cooper Test (Peak)"),),
        "R2": (
            _ex("Yoga/Flow", 1, "30 min", "Mobility focus to maintain range of motion"),
            _ex("Inversion Table", 1, "2 min", "Spine decompression"),
        ),
        # shared rest / check-in day
        "REST": (
            _ex("Check-in", 1, "1", "Complete weekly review form"),
            _ex("Meal Prep", 1, "1", "Plan nutrition for next week"),
        ),
    }
)


def phase_id_for_week(week: int) -> str:
    for phase in PHASES.values():
        if phase.covers(week):
            return phase.id
    # weeks past the end keep repeating the last phase
    return "phase1" if week < 1 else "phase3"


def exercises_for(code: str | None) -> tuple[ExerciseSpec, ...]:
    if not code:
        return ()
    return WORKOUTS.get(code, ())
