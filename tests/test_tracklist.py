"""
Tests for the flat track file.
"""

import pytest

from tracklist2playlist.errors import TrackFileError
from tracklist2playlist.models import Track
from tracklist2playlist.tracklist import parse_line, read_tracks, write_tracks


class TestWriteTracks:
    """Test writing track files."""

    def test_one_line_per_track(self, tmp_path):
        path = tmp_path / "tracks.txt"
        tracks = [
            Track(artist="Artist1", title="Title1", duration="03:00"),
            Track(artist="Artist2", title="Title2"),
        ]

        assert write_tracks(tracks, path) == 2
        assert path.read_text(encoding="utf-8") == "Artist1 - Title1\nArtist2 - Title2\n"

    def test_replaces_existing_content(self, tmp_path):
        path = tmp_path / "tracks.txt"
        path.write_text("old - line\n" * 5, encoding="utf-8")

        write_tracks([Track(artist="Björk", title="Jóga")], path)

        assert path.read_text(encoding="utf-8") == "Björk - Jóga\n"

    def test_unwritable_path(self, tmp_path):
        with pytest.raises(TrackFileError, match="failed to write tracks"):
            write_tracks([Track(artist="A", title="T")], tmp_path / "missing" / "tracks.txt")


class TestReadTracks:
    """Test reading track files."""

    def test_reads_valid_lines(self, tmp_path):
        path = tmp_path / "tracks.txt"
        path.write_text("Artist1 - Title1\n\n  Artist2 -  Title2  \r\n", encoding="utf-8")

        assert read_tracks(path) == [
            Track(artist="Artist1", title="Title1"),
            Track(artist="Artist2", title="Title2"),
        ]

    def test_skips_ambiguous_and_invalid_lines(self, tmp_path):
        path = tmp_path / "tracks.txt"
        path.write_text(
            "no separator here\nA - B - C\nArtist1 - Title1\nArtist-Title\n",
            encoding="utf-8",
        )

        assert read_tracks(path) == [Track(artist="Artist1", title="Title1")]

    def test_no_valid_tracks(self, tmp_path):
        path = tmp_path / "tracks.txt"
        path.write_text("\n   \njunk\n", encoding="utf-8")

        with pytest.raises(TrackFileError, match="no valid tracks found in file"):
            read_tracks(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(TrackFileError, match="failed to read file"):
            read_tracks(tmp_path / "nope.txt")

    def test_round_trip_drops_duration(self, tmp_path):
        path = tmp_path / "tracks.txt"
        tracks = [
            Track(artist="Band A", title="Song One", duration="03:21"),
            Track(artist="Band B", title="Song Two", duration="04:10"),
        ]

        write_tracks(tracks, path)
        loaded = read_tracks(path)

        assert [(t.artist, t.title) for t in loaded] == [(t.artist, t.title) for t in tracks]
        assert all(t.duration == "" for t in loaded)

    def test_round_trip_loses_titles_with_separator(self, tmp_path):
        path = tmp_path / "tracks.txt"
        write_tracks(
            [
                Track(artist="Band A", title="Live - Remastered"),
                Track(artist="Band B", title="Song Two"),
            ],
            path,
        )

        assert read_tracks(path) == [Track(artist="Band B", title="Song Two")]


class TestParseLine:
    """Test single line parsing."""

    @pytest.mark.parametrize("line", ["", "   ", "single", "a - b - c"])
    def test_invalid(self, line):
        assert parse_line(line) is None

    def test_hyphenated_names(self):
        assert parse_line("Jay-Z - Run-DMC Tribute") == Track(artist="Jay-Z", title="Run-DMC Tribute")
