"""Shared fixtures: a file-backed gateway in a temp dir and a session on it."""

import pytest

from logic.logic_session import HealthSession
from state_io import StateGateway


@pytest.fixture
def gateway(tmp_path):
    return StateGateway(tmp_path / "state.json")


@pytest.fixture
def session(gateway):
    s = HealthSession.open(gateway, now="2024-03-01")
    yield s
    s.close()
