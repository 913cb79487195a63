from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from resetfit.config import settings


Compliance = Literal["on_target", "off_target", "no_data"]

COMPLIANCE_LABELS: dict[Compliance, str] = {
    "on_target": "On Target",
    "off_target": "Off Target",
    "no_data": "No Data",
}


@dataclass(frozen=True)
class Targets:
    calories: int
    protein_g: int
    calories_low: int
    calories_high: int


def default_targets() -> Targets:
    return Targets(
        calories=settings.calorie_target,
        protein_g=settings.protein_target_g,
        calories_low=settings.calorie_band_low,
        calories_high=settings.calorie_band_high,
    )


def to_number(value: Any) -> float | None:
    # entries come from form fields, so "1800" and 1800 are the same value
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    s = str(value).strip()
    if not s:
        return None
    try:
        return float(s)
    except ValueError:
        return None


def calorie_compliance(calories: Any, *, low: int | None = None, high: int | None = None) -> Compliance:
    lo = settings.calorie_band_low if low is None else low
    hi = settings.calorie_band_high if high is None else high
    kcal = to_number(calories)
    if kcal is None:
        return "no_data"
    if lo <= kcal <= hi:
        return "on_target"
    return "off_target"


def macros_line(calories: Any, protein: Any, targets: Targets | None = None) -> str:
    t = targets or default_targets()
    kcal = to_number(calories)
    p = to_number(protein)
    kcal_s = f"{kcal:g}" if kcal is not None else "0"
    p_s = f"{p:g}" if p is not None else "0"
    return f"Calories: {kcal_s} / {t.calories} kcal | Protein: {p_s} / {t.protein_g} g"
