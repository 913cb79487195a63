from __future__ import annotations

import datetime as dt

import pytest

from resetfit.checkins import new_checkin, order_history, weight_trend


def test_history_sorted_by_week_number() -> None:
    docs = {
        "10": {"weight": "170", "week": 10},
        "2": {"weight": "181.5", "week": 2},
        "1": {"weight": "184", "week": 1},
    }
    history = order_history(docs)
    assert [c.week for c in history] == [1, 2, 10]


def test_non_numeric_week_ids_are_skipped() -> None:
    history = order_history({"final": {"weight": 1}, "3": {"weight": 2}})
    assert [c.week for c in history] == [3]


def test_week_comes_from_document_id() -> None:
    [c] = order_history({"4": {"weight": 1, "week": 99, "painLevel": "3"}})
    assert c.week == 4
    assert c.pain_level == "3"


def test_new_checkin() -> None:
    now = dt.datetime(2024, 1, 21, 18, 0, tzinfo=dt.timezone.utc)
    c = new_checkin(3, {"weight": "180.2", "waist": "36", "painLevel": "5", "notes": "stronger"}, now=now)
    assert c.week == 3
    assert c.pain_level == "5"
    assert c.to_doc() == {
        "weight": "180.2",
        "waist": "36",
        "painLevel": "5",
        "notes": "stronger",
        "date": "2024-01-21T18:00:00+00:00",
        "week": 3,
    }


def test_new_checkin_rejects_week_zero() -> None:
    with pytest.raises(ValueError):
        new_checkin(0, {})


def test_weight_trend() -> None:
    history = order_history({"2": {"weight": "181"}, "1": {"weight": 184}, "3": {}})
    assert weight_trend(history) == [("W1", 184.0), ("W2", 181.0), ("W3", None)]
