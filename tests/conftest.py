"""
Pytest configuration and shared fixtures for the test suite.
"""

import pytest
from pathlib import Path

import sys

sys.path.insert(0, str(Path(__file__).parent.parent))

from q3log.config import quake_data


SAMPLE_LOG_LINES = [
    "  0:00 ------------------------------------------------------------",
    "  0:00 InitGame: \\sv_floodProtect\\1\\sv_hostname\\Code Miner Server\\mapname\\q3dm17",
    " 15:00 Exit: Timelimit hit.",
    " 20:34 ClientConnect: 2",
    " 20:37 ------------------------------------------------------------",
    "  0:00 ------------------------------------------------------------",
    "  0:00 InitGame: \\sv_floodProtect\\1\\sv_hostname\\Code Miner Server\\mapname\\q3dm17",
    " 20:38 ClientUserinfoChanged: 2 n\\Isgalamido\\t\\0\\model\\uriel/zael",
    " 20:54 Kill: 1022 2 22: <world> killed Isgalamido by MOD_TRIGGER_HURT",
    " 22:06 Kill: 2 3 7: Isgalamido killed Mocinha by MOD_ROCKET_SPLASH",
    " 22:18 Kill: 2 2 7: Isgalamido killed Isgalamido by MOD_ROCKET_SPLASH",
    " 22:40 Kill: 2 2 7: Isgalamido killed Isgalamido by MOD_ROCKET_SPLASH",
    " 23:06 Kill: 1022 2 22: <world> killed Isgalamido by MOD_TRIGGER_HURT",
    "  1:47 ShutdownGame:",
    "  1:47 ------------------------------------------------------------",
    "  0:00 ------------------------------------------------------------",
    "  0:00 InitGame: \\sv_floodProtect\\1\\sv_hostname\\Code Miner Server\\mapname\\q3dm17",
    "  2:22 Kill: 3 2 10: Isgalamido killed Dono da Bola by MOD_RAILGUN",
    "  2:30 Kill: 4 3 6: Zeh killed Dono da Bola by MOD_ROCKET",
]


@pytest.fixture
def sample_log_lines():
    """Sample games.log lines covering three games."""
    return list(SAMPLE_LOG_LINES)


@pytest.fixture
def sample_log_text(sample_log_lines):
    """Sample games.log content as a single string."""
    return "\n".join(sample_log_lines)


@pytest.fixture
def sample_log_file(tmp_path, sample_log_text):
    """Sample games.log written to a temporary file."""
    log_path = tmp_path / "games.log"
    log_path.write_text(sample_log_text + "\n", encoding="utf-8")
    return log_path


@pytest.fixture
def isolated_quake_data(monkeypatch):
    """Give each test its own copy of the mutable display mappings."""
    monkeypatch.setattr(quake_data, "KILL_METHOD_LABELS", dict(quake_data.KILL_METHOD_LABELS))
    monkeypatch.setattr(quake_data, "ENVIRONMENTAL_METHODS", set(quake_data.ENVIRONMENTAL_METHODS))
    return quake_data


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "cli: mark test as command-line interface related")


def pytest_collection_modifyitems(config, items):
    """Modify collected test items with markers."""
    for item in items:
        if "test_cli" in item.path.name:
            item.add_marker(pytest.mark.cli)
