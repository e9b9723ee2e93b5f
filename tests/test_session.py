"""Tests for the session state container and its persistence hooks."""

import json
from unittest.mock import MagicMock

from logic.logic_session import HealthSession
from logic.logic_spoons import SpoonBudget
from state_io import StateGateway

ENTRY = {"date": "2024-03-01", "pain": 5, "fatigue": 3, "mood": 4, "sleep": 8, "stress": 2, "notes": "ok"}


def saved(gateway):
    return json.loads(gateway.path.read_text(encoding="utf-8"))


def mock_gateway(data=None):
    gw = MagicMock(spec=StateGateway)
    gw.path = "memory"
    gw.load.return_value = data
    gw.save.return_value = True
    gw.clear.return_value = True
    return gw


def test_open_without_stored_data_starts_fresh(session):
    assert len(session.store) == 0
    assert session.budget.to_dict() == {"date": "2024-03-01", "total": 10, "used": 0}


def test_open_restores_and_rolls_over_stale_budget():
    gw = mock_gateway({"entries": [ENTRY], "spoons": {"date": "2024-02-29", "total": 7, "used": 4}})
    s = HealthSession.open(gw, now="2024-03-01")

    assert s.store.get("2024-03-01").notes == "ok"
    assert s.budget.to_dict() == {"date": "2024-03-01", "total": 7, "used": 0}
    gw.save.assert_called_once()


def test_open_with_partial_payload_uses_defaults():
    s = HealthSession.open(mock_gateway({"entries": "nope"}), now="2024-03-01")
    assert len(s.store) == 0
    assert s.budget.total == 10


def test_every_mutation_saves_full_snapshot(session, gateway):
    session.save_entry(ENTRY)
    assert saved(gateway)["entries"] == [ENTRY]

    session.consume_spoons(3)
    assert saved(gateway)["spoons"]["used"] == 3

    session.release_spoons(1)
    assert saved(gateway)["spoons"]["used"] == 2

    session.set_capacity(12)
    assert saved(gateway)["spoons"]["total"] == 12

    session.reset_spoons()
    assert saved(gateway)["spoons"]["used"] == 0

    session.delete_entry("2024-03-01")
    assert saved(gateway)["entries"] == []


def test_noop_delete_and_same_day_tick_do_not_save():
    gw = mock_gateway()
    s = HealthSession.open(gw, now="2024-03-01")
    gw.save.reset_mock()

    assert s.delete_entry("2023-01-01") is False
    assert s.tick("2024-03-01") is False
    gw.save.assert_not_called()


def test_tick_rollover_saves(session, gateway):
    session.consume_spoons(4)
    assert session.tick("2024-03-02") is True
    assert saved(gateway)["spoons"] == {"date": "2024-03-02", "total": 10, "used": 0}


def test_complete_exercise_consumes_its_cost(session):
    ex = session.complete_exercise("stretch-5")
    assert ex.spoons == 1
    assert session.budget.used == 1

    session.complete_exercise("breath-4-7-8")
    assert session.budget.used == 1


def test_unknown_exercise_changes_nothing(session):
    assert session.complete_exercise("marathon") is None
    assert session.budget.used == 0


def test_save_failure_keeps_session_in_memory():
    gw = mock_gateway()
    gw.save.return_value = False
    s = HealthSession.open(gw, now="2024-03-01")

    s.save_entry(ENTRY)
    s.consume_spoons(2)
    assert s.store.get("2024-03-01").pain == 5
    assert s.budget.used == 2


def test_reset_all_requires_confirmation(session, gateway):
    session.save_entry(ENTRY)
    session.consume_spoons(2)

    assert session.reset_all(False) is False
    assert len(session.store) == 1
    assert gateway.path.exists()


def test_reset_all_clears_everything(session, gateway):
    session.save_entry(ENTRY)
    session.set_capacity(20)
    session.consume_spoons(2)

    assert session.reset_all(True, now="2024-03-05") is True
    assert len(session.store) == 0
    assert session.budget == SpoonBudget(date="2024-03-05", total=10, used=0)
    assert not gateway.path.exists()


def test_state_survives_reopen(gateway):
    first = HealthSession.open(gateway, now="2024-03-01")
    first.save_entry(ENTRY)
    first.consume_spoons(2)

    second = HealthSession.open(gateway, now="2024-03-01")
    assert second.snapshot() == first.snapshot()


def test_averages_and_recent_views(session):
    session.save_entry({**ENTRY, "date": "2024-03-02", "pain": 4, "fatigue": 6, "sleep": 7, "stress": 2})
    session.save_entry({**ENTRY, "date": "2024-03-01", "pain": 6, "fatigue": 4, "sleep": 5, "stress": 4})

    assert session.averages() == {"pain": 5, "fatigue": 5, "sleep": 6, "stress": 3}
    assert [e.date for e in session.recent_window()] == ["2024-03-01", "2024-03-02"]
    assert [e.date for e in session.recent_entries()] == ["2024-03-02", "2024-03-01"]


def test_rollover_task_starts_and_stops(session):
    session.start_rollover(interval_seconds=3600)
    assert session.rollover_running
    # starting twice keeps the single job
    session.start_rollover(interval_seconds=3600)
    session.close()
    assert not session.rollover_running


def test_context_manager_stops_rollover(gateway):
    with HealthSession.open(gateway, now="2024-03-01") as s:
        s.start_rollover(interval_seconds=3600)
        assert s.rollover_running
    assert not s.rollover_running


def test_missing_spoons_payload_uses_session_default_total():
    s = HealthSession.open(mock_gateway({"entries": []}), now="2024-03-01", default_total=15)
    assert s.budget.to_dict() == {"date": "2024-03-01", "total": 15, "used": 0}
