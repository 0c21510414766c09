"""Shared test fixtures for themepaint."""

import os
import tempfile

import pytest

# Keep log files out of the user's home directory during test runs
os.environ.setdefault("THEMEPAINT_LOG_DIR", tempfile.mkdtemp(prefix="themepaint-logs-"))

from themepaint.themes import DARK_THEME, LIGHT_THEME, ThemeSnapshot  # noqa: E402


@pytest.fixture
def light_snapshot() -> ThemeSnapshot:
    """Snapshot of the built-in light theme."""
    return LIGHT_THEME.snapshot("light")


@pytest.fixture
def dark_snapshot() -> ThemeSnapshot:
    """Snapshot of the built-in dark theme."""
    return DARK_THEME.snapshot("dark")


@pytest.fixture
def config_dir(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Point the settings directory at a temporary path.

    Returns:
        Path to the temporary configuration directory.
    """
    monkeypatch.setenv("THEMEPAINT_CONFIG_DIR", str(tmp_path))
    return tmp_path
