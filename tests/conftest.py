"""Shared fixtures for the test suite."""

import pytest

from tests.builders import inner_table, page, track_row
from tracklist2playlist.config import get_settings
from tracklist2playlist.logging import configure_logging


@pytest.fixture(autouse=True)
def _logging():
    configure_logging(level="DEBUG", format="console")


@pytest.fixture
def settings_env(tmp_path, monkeypatch):
    """Isolated environment for code that reads get_settings()."""
    monkeypatch.chdir(tmp_path)
    for var in (
        "SPOTIFY_CLIENT_ID",
        "SPOTIFY_CLIENT_SECRET",
        "SOURCE_URL",
        "COLUMN_LAYOUT",
        "PLAYLIST_PUBLIC",
        "LOG_LEVEL",
        "LOG_FORMAT",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("TRACKS_FILE", str(tmp_path / "tracks.txt"))
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()


@pytest.fixture
def two_track_page() -> str:
    return page(
        inner_table(
            track_row("1. Song One", "03:21", "Band A", spacer=True),
            track_row("2. Song Two", "04:10", "Band B"),
        )
    )
