from datetime import date

import pytest


@pytest.fixture
def today():
    """A fixed reference date so no test depends on the system clock."""
    return date(2026, 3, 15)


@pytest.fixture
def mock_home(tmp_path, monkeypatch):
    """Mocks Path.home() to point to a temp dir."""
    home = tmp_path / "home"
    home.mkdir()

    # Mocking HOME to a temp directory to isolate config/logs
    monkeypatch.setenv("HOME", str(home))
    for key in (
        "STUDYHUB_LOG_LEVEL",
        "STUDYHUB_VERBOSE",
        "STUDYHUB_DEFAULT_TARGET_CARDS_PER_DAY",
        "STUDYHUB_DEFAULT_TARGET_MINUTES_PER_DAY",
        "STUDYHUB_ACTIVITY_WINDOW_DAYS",
    ):
        monkeypatch.delenv(key, raising=False)
    return home
