"""Pipeline orchestrator for tracklist2playlist.

Coordinates the full flow:
1. Fetch the tracklist page and extract tracks
2. Save tracks to / load tracks from the flat track file
3. Search every track on Spotify
4. Create the playlist and add the found tracks
"""

from pathlib import Path

from .config import Settings, get_settings
from .errors import PlaylistError
from .logging import get_logger
from .models import PlaylistResult, Track
from .sources import TrackSource
from .sources.page import PageSource
from .spotify import SpotifyClient
from .tracklist import read_tracks, write_tracks

logger = get_logger(__name__)


class Pipeline:
    """Main pipeline orchestrator for tracklist2playlist."""

    def __init__(self, settings: Settings | None = None, spotify: SpotifyClient | None = None):
        """Initialize the pipeline.

        Args:
            settings: Optional settings override
            spotify: Optional ready Spotify client
        """
        self.settings = settings or get_settings()

        # Spotify client (initialized lazily to defer OAuth)
        self._spotify = spotify

    @property
    def spotify(self) -> SpotifyClient:
        """Lazy initialization of Spotify client."""
        if not self._spotify:
            if not self.settings.has_spotify_credentials:
                raise PlaylistError(
                    "Spotify credentials missing: set SPOTIFY_CLIENT_ID and SPOTIFY_CLIENT_SECRET"
                )
            self._spotify = SpotifyClient(
                client_id=self.settings.spotify_client_id,
                client_secret=self.settings.spotify_client_secret,
                redirect_uri=self.settings.spotify_redirect_uri,
                cache_path=self.settings.token_cache_path,
            )
        return self._spotify

    def page_source(self, url: str | None = None) -> PageSource:
        return PageSource(
            url or self.settings.source_url,
            layout=self.settings.column_layout,
            timeout=self.settings.request_timeout,
        )

    def scrape(self, source: TrackSource | None = None) -> list[Track]:
        """Fetch tracks from a source, the configured page by default."""
        if source is not None:
            return source.fetch_tracks()

        with self.page_source() as page:
            return page.fetch_tracks()

    def save(self, tracks: list[Track], path: Path | None = None) -> Path:
        path = path or self.settings.tracks_file
        write_tracks(tracks, path)
        return path

    def load(self, path: Path | None = None) -> list[Track]:
        return read_tracks(path or self.settings.tracks_file)

    def create_playlist(
        self,
        tracks: list[Track],
        name: str,
        description: str = "",
        public: bool | None = None,
    ) -> PlaylistResult:
        """Create a Spotify playlist holding the given tracks.

        Tracks are searched before the playlist is created, so nothing is
        created when none of them can be found.

        Args:
            tracks: Tracks to look up
            name: Playlist name
            description: Playlist description
            public: Whether the playlist is public, settings default if None

        Returns:
            PlaylistResult with found and missing tracks

        Raises:
            PlaylistError: If the name is empty, nothing was found or Spotify fails
        """
        name = name.strip()
        if not name:
            raise PlaylistError("playlist name cannot be empty")

        logger.info("playlist_pipeline_start", name=name, tracks=len(tracks))

        found: list[Track] = []
        not_found: list[Track] = []
        track_ids: list[str] = []
        for track in tracks:
            track_id = self.spotify.search_track(track)
            if track_id:
                found.append(track)
                track_ids.append(track_id)
            else:
                not_found.append(track)

        logger.info("tracks_searched", found=len(found), not_found=len(not_found))

        if not track_ids:
            raise PlaylistError("no tracks found to add to the playlist")

        playlist = self.spotify.create_playlist(
            name=name,
            description=description,
            public=self.settings.playlist_public if public is None else public,
        )
        added = self.spotify.add_tracks_to_playlist(
            playlist["id"],
            track_ids,
            batch_size=self.settings.batch_size,
        )

        logger.info("playlist_pipeline_complete", playlist_id=playlist["id"], tracks_added=added)

        return PlaylistResult(
            playlist_id=playlist["id"],
            playlist_url=playlist["external_urls"]["spotify"],
            playlist_name=playlist.get("name", name),
            tracks_added=added,
            found=found,
            not_found=not_found,
        )

    def create_playlist_from_file(
        self,
        name: str,
        description: str = "",
        path: Path | None = None,
        public: bool | None = None,
    ) -> PlaylistResult:
        """Create a playlist from the tracks in a track file."""
        tracks = self.load(path)
        return self.create_playlist(tracks, name, description, public)
