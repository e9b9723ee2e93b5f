"""
Gradio callbacks. Each takes the HealthSession first (bound in app.py) and
returns plain values for the components it updates.
"""

import logging
from typing import Any, Dict, List

import pandas as pd

from storage import today_str
from .logic_entries import ENTRY_FIELDS, HealthEntry
from .logic_export import write_export
from .logic_session import HealthSession
from .logic_stats import TREND_FIELDS, trend_rows

logger = logging.getLogger(__name__)

# Initial values of the tracker form
DEFAULT_FORM: Dict[str, Any] = {
    "pain": 4,
    "fatigue": 4,
    "mood": 3,
    "sleep": 7,
    "stress": 3,
    "notes": "",
}

DATE_HINT = "Please enter the date as YYYY-MM-DD."


def entries_frame(entries: List[HealthEntry]) -> pd.DataFrame:
    return pd.DataFrame([e.to_dict() for e in entries], columns=ENTRY_FIELDS)


def recent_entries_frame(session: HealthSession) -> pd.DataFrame:
    return entries_frame(session.recent_entries())


def trend_frame(session: HealthSession) -> pd.DataFrame:
    rows = trend_rows(session.recent_window())
    return pd.DataFrame(rows, columns=["date", *TREND_FIELDS])


def averages_markdown(session: HealthSession) -> str:
    avg = session.averages()
    return (
        "### Averages\n"
        f"- Pain: **{avg['pain']}**\n"
        f"- Fatigue: **{avg['fatigue']}**\n"
        f"- Sleep: **{avg['sleep']} h**\n"
        f"- Stress: **{avg['stress']}**"
    )


def spoons_markdown(session: HealthSession) -> str:
    budget = session.budget
    return (
        "### 🥄 Energy (spoons)\n"
        f"Today: **{budget.remaining} / {budget.total}** spoons left "
        f"({budget.used} used)"
    )


def today_markdown(session: HealthSession) -> str:
    entry = session.store.get(today_str())
    if entry is None:
        return "### Today\nNo entry for today yet. Open the tracker to log one."
    return (
        "### Today\n"
        f"Pain {entry.pain} · Fatigue {entry.fatigue} · Mood {entry.mood} · "
        f"Sleep {entry.sleep} h · Stress {entry.stress}"
    )


def home_view_action(session: HealthSession):
    """Refresh the home page: today's stats, averages and spoons."""
    return today_markdown(session), averages_markdown(session), spoons_markdown(session)


# ================== Tracker ==================


def load_entry_action(session: HealthSession, date_str: str):
    """Load the entry for a date into the form, or the defaults if none exists."""
    date_str = (date_str or "").strip() or today_str()
    entry = session.store.get(date_str)
    if entry is None:
        values = dict(DEFAULT_FORM)
        msg = f"Date: {date_str} (no record yet, you can create one)"
    else:
        values = entry.to_dict()
        date_str = entry.date
        msg = f"Date: {date_str} (loaded existing record)"
    return (
        date_str,
        values["pain"],
        values["fatigue"],
        values["mood"],
        values["sleep"],
        values["stress"],
        values["notes"],
        msg,
    )


def save_entry_action(
    session: HealthSession,
    date_str: str,
    pain,
    fatigue,
    mood,
    sleep,
    stress,
    notes: str,
):
    raw = {
        "date": (date_str or "").strip() or today_str(),
        "pain": pain,
        "fatigue": fatigue,
        "mood": mood,
        "sleep": sleep,
        "stress": stress,
        "notes": notes or "",
    }
    try:
        entry = session.save_entry(raw)
    except ValueError:
        return DATE_HINT, recent_entries_frame(session)
    return f"Entry saved for {entry.date}.", recent_entries_frame(session)


def delete_entry_action(session: HealthSession, date_str: str):
    date_str = (date_str or "").strip()
    if not date_str:
        return DATE_HINT, recent_entries_frame(session)
    if session.delete_entry(date_str):
        msg = f"Entry for {date_str} deleted."
    else:
        msg = f"No entry for {date_str}."
    return msg, recent_entries_frame(session)


# ================== Spoons & exercises ==================


def adjust_spoons_action(session: HealthSession, delta: int):
    """Manual -1 / +1 buttons."""
    if delta >= 0:
        session.consume_spoons(delta)
    else:
        session.release_spoons(-delta)
    return spoons_markdown(session)


def reset_spoons_action(session: HealthSession):
    session.reset_spoons()
    return spoons_markdown(session)


def complete_exercise_action(session: HealthSession, exercise_id: str):
    exercise = session.complete_exercise(exercise_id)
    if exercise is None:
        return "Unknown exercise.", spoons_markdown(session)
    return f"Well done: {exercise.title} (-{exercise.spoons} spoons).", spoons_markdown(session)


def set_capacity_action(session: HealthSession, total):
    new_total = session.set_capacity(total)
    return f"Daily spoons set to {new_total}.", spoons_markdown(session)


# ================== Settings ==================


def export_csv_action(session: HealthSession):
    """Write the CSV export and hand its path to the download component."""
    try:
        path = write_export(list(session.store))
    except OSError:
        logger.exception("CSV export failed")
        return None, "Export failed, see the log for details."
    return path, f"Exported {len(session.store)} entries."


def reset_all_action(session: HealthSession, confirmed: bool):
    """Delete everything, but only when the confirmation box is ticked."""
    if not session.reset_all(bool(confirmed)):
        return (
            "Please tick the confirmation box first. Nothing was deleted.",
            False,
            recent_entries_frame(session),
            spoons_markdown(session),
        )
    return (
        "All data deleted.",
        False,
        recent_entries_frame(session),
        spoons_markdown(session),
    )
