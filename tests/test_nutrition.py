from __future__ import annotations

import pytest

from resetfit.nutrition import Targets, calorie_compliance, macros_line, to_number


@pytest.mark.parametrize(
    "calories,expected",
    [
        (1800, "on_target"),
        (1700, "on_target"),
        (1900, "on_target"),
        ("1800", "on_target"),
        (2000, "off_target"),
        (1699, "off_target"),
        (0, "off_target"),
        (-20, "off_target"),
        (None, "no_data"),
        ("", "no_data"),
        ("lots", "no_data"),
    ],
)
def test_calorie_compliance(calories, expected: str) -> None:
    assert calorie_compliance(calories) == expected


def test_band_can_be_overridden() -> None:
    assert calorie_compliance(2000, low=1900, high=2100) == "on_target"


def test_to_number() -> None:
    assert to_number(" 12.5 ") == 12.5
    assert to_number(True) is None
    assert to_number(None) is None


def test_macros_line() -> None:
    t = Targets(calories=1800, protein_g=160, calories_low=1700, calories_high=1900)
    assert macros_line("1750", None, t) == "Calories: 1750 / 1800 kcal | Protein: 0 / 160 g"
