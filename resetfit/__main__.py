from __future__ import annotations

import asyncio
import datetime as dt
import logging

from resetfit.checkins import PAIN_CHOICES
from resetfit.config import settings
from resetfit.init_db import init_db
from resetfit.render import checkin_table, day_summary
from resetfit.service import DEFAULT_GOALS, ProgramTracker
from resetfit.store import SqlDocumentStore


ONBOARDING_QUESTIONS = {
    "name": "Your name?",
    "start_date": "Start date (YYYY-MM-DD, empty for today)?",
    "start_weight": "Current weight (lbs)?",
    "goals": f"Main goal? (empty for: {DEFAULT_GOALS})",
}


async def onboard(app: ProgramTracker) -> None:
    answers = {k: input(q + " ").strip() for k, q in ONBOARDING_QUESTIONS.items()}
    try:
        start = dt.date.fromisoformat(answers["start_date"]) if answers["start_date"] else app.today()
    except ValueError:
        print("Could not read the date, starting today.")
        start = app.today()
    await app.setup_profile(
        name=answers["name"],
        start_date=start,
        start_weight=answers["start_weight"] or None,
        goals=answers["goals"] or DEFAULT_GOALS,
    )


def pain_question() -> str:
    options = ", ".join(f"{k} = {v}" for k, v in PAIN_CHOICES.items())
    return f"Avg pain level this week? ({options})"


async def weekly_checkin(app: ProgramTracker) -> None:
    week = app.program_day().week
    print(f"Weekly Check-in: Week {week}")
    weight = input("Current weight (lbs)? ").strip()
    waist = input("Waist (inches)? ").strip()
    pain = input(pain_question() + " ").strip()
    if pain and (not pain.isdigit() or int(pain) not in PAIN_CHOICES):
        print("Unknown pain level, leaving it empty.")
        pain = ""
    notes = input("Wins / challenges / notes? ").strip()
    await app.submit_checkin(
        {
            "weight": weight or None,
            "waist": waist or None,
            "painLevel": pain or None,
            "notes": notes or None,
        },
        week=week,
    )


async def main() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    await init_db()
    app = ProgramTracker(SqlDocumentStore())
    await app.start()

    if app.needs_setup and not app.read_only:
        print("Welcome to the Reset Program. Let's set your baseline.")
        await onboard(app)

    day = app.program_day()
    if (
        not app.read_only
        and not app.needs_setup
        and day.slot.code == "REST"
        and all(c.week != day.week for c in app.checkins)
    ):
        await weekly_checkin(app)

    print(day_summary(app.program_day(), app.day_log()))
    print()
    print(checkin_table(app.checkins))


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
