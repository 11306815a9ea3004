"""
Tests for the data models.
"""

from tracklist2playlist.models import Album, PlaylistResult, Track


class TestTrack:
    """Test the Track model."""

    def test_defaults_are_empty(self):
        track = Track()
        assert (track.title, track.artist, track.duration) == ("", "", "")

    def test_is_complete(self):
        assert Track(title="Song One", artist="Band A").is_complete()
        assert not Track(title="Song One").is_complete()
        assert not Track(artist="Band A", duration="03:21").is_complete()


class TestAlbum:
    """Test the Album model."""

    def test_defaults(self):
        album = Album(title="Various Artists: Collection")

        assert album.title == "Various Artists: Collection"
        assert album.year == ""
        assert album.tracks == []

    def test_tracks_are_not_shared(self):
        first = Album(title="One")
        first.tracks.append(Track(title="Song One", artist="Band A"))

        assert Album(title="Two").tracks == []

    def test_from_dict(self):
        album = Album.model_validate(
            {
                "title": "Collection",
                "year": "1998",
                "tracks": [{"title": "Song One", "artist": "Band A", "duration": "03:21"}],
            }
        )

        assert album.year == "1998"
        assert album.tracks == [Track(title="Song One", artist="Band A", duration="03:21")]


class TestPlaylistResult:
    """Test the PlaylistResult model."""

    def test_track_lists_default_empty(self):
        result = PlaylistResult(
            playlist_id="pl1",
            playlist_url="https://open.spotify.com/playlist/pl1",
            playlist_name="Mix",
            tracks_added=0,
        )

        assert result.found == []
        assert result.not_found == []
