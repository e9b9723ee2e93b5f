"""Tests for the JSON state gateway."""

import json
import logging
from unittest.mock import patch

from logic.logic_session import HealthSession
from state_io import StateGateway

SNAPSHOT = {
    "entries": [
        {"date": "2024-03-01", "pain": 5, "fatigue": 3, "mood": 4, "sleep": 8, "stress": 2, "notes": "ok"}
    ],
    "spoons": {"date": "2024-03-01", "total": 10, "used": 2},
}


def test_load_missing_file_returns_none(gateway):
    assert gateway.load() is None


def test_save_then_load(gateway):
    assert gateway.save(SNAPSHOT) is True
    assert gateway.load() == SNAPSHOT


def test_save_creates_parent_dirs(tmp_path):
    gw = StateGateway(tmp_path / "nested" / "dir" / "state.json")
    assert gw.save(SNAPSHOT) is True
    assert gw.path.exists()


def test_corrupt_file_loads_as_none(gateway, caplog):
    gateway.path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        assert gateway.load() is None
    assert "not valid JSON" in caplog.text


def test_non_utf8_file_loads_as_none(gateway, caplog):
    gateway.path.write_bytes(b'{"entries": [], "notes": "\xff\xfe"}')
    with caplog.at_level(logging.WARNING):
        assert gateway.load() is None
    assert "starting empty" in caplog.text


def test_session_opens_on_non_utf8_file(gateway):
    gateway.path.write_bytes(b"\xff\xfe")
    s = HealthSession.open(gateway, now="2024-03-01")
    assert len(s.store) == 0
    assert s.budget.used == 0


def test_wrong_top_level_type_loads_as_none(gateway):
    gateway.path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
    assert gateway.load() is None


def test_save_failure_is_reported_not_raised(gateway, caplog):
    with patch("state_io.atomic_write_json", side_effect=OSError("disk full")):
        with caplog.at_level(logging.ERROR):
            assert gateway.save(SNAPSHOT) is False
    assert "continuing in memory" in caplog.text
    assert not gateway.path.exists()


def test_unserializable_snapshot_leaves_no_temp_files(gateway):
    assert gateway.save({"entries": [object()]}) is False
    assert list(gateway.path.parent.iterdir()) == []


def test_clear_removes_file_and_tolerates_absence(gateway):
    gateway.save(SNAPSHOT)
    assert gateway.clear() is True
    assert not gateway.path.exists()
    assert gateway.clear() is True
