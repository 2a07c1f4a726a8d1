"""
Pytest configuration and shared fixtures.
"""

from pathlib import Path

import pytest

from tally import configuration
from tally import time as tally_time
from tally.repository.configuration import CONFIGURATION_REPO
from tally.repository.record import RECORD_REPO
from tally.view import state as view_state

PROGRAM = {
    "start_date": "2026-01-26",
    "deadline_date": "2026-04-25",
    "target_hours": 500.0,
    "daily_target_hours": 8.0,
}


@pytest.fixture(autouse=True)
def clear_warned_inputs():
    """Each test sees malformed-date warnings as if for the first time."""
    tally_time._warned_inputs.clear()
    yield
    tally_time._warned_inputs.clear()


@pytest.fixture
def program():
    """Forecast keyword arguments for the default program."""
    return dict(PROGRAM)


@pytest.fixture
def sample_logs():
    """Five logged days in the first two program weeks, 37 hours in total."""
    return [
        {"date": "2026-01-26", "hours": 8},
        {"date": "2026-01-27", "hours": 8},
        {"date": "2026-01-28", "hours": 8},
        {"date": "2026-02-02", "hours": 6},
        {"date": "2026-02-03", "hours": 7},
    ]


@pytest.fixture
def isolated_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point config and data files at a temporary directory."""
    config_path = tmp_path / "config"
    data_path = tmp_path / "data"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(configuration, "DATA_RECORDS_PATH", data_path / "records.yaml")

    CONFIGURATION_REPO.reset()
    RECORD_REPO.reset()
    view_state.set_show_header(True)
    yield tmp_path
    CONFIGURATION_REPO.reset()
    RECORD_REPO.reset()
    view_state.set_show_header(True)
