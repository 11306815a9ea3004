"""Spotify API client for playlist creation.

Handles:
- OAuth authentication with token caching
- Track search by title and artist
- Playlist creation and batched track insertion
"""

from pathlib import Path
from typing import Any

import spotipy
from spotipy.oauth2 import SpotifyOAuth

from ..errors import PlaylistError
from ..logging import get_logger
from ..models import Track

logger = get_logger(__name__)

# Spotify API limit per playlist_add_items request
MAX_BATCH_SIZE = 100


def build_search_query(track: Track) -> str:
    return f"track:{track.title} artist:{track.artist}"


class SpotifyClient:
    """Spotify API client for tracklist2playlist.

    Wraps spotipy with structured logging.
    """

    SCOPE = "playlist-modify-public playlist-modify-private"

    def __init__(
        self,
        client_id: str = "",
        client_secret: str = "",
        redirect_uri: str = "http://127.0.0.1:8888/callback",
        cache_path: Path | None = None,
        client: spotipy.Spotify | None = None,
    ):
        """Initialize the Spotify client.

        Args:
            client_id: Spotify application client ID
            client_secret: Spotify application client secret
            redirect_uri: OAuth redirect URI
            cache_path: Path for token cache file
            client: Ready spotipy client, skips OAuth setup
        """
        if client is None:
            if cache_path:
                cache_path.parent.mkdir(parents=True, exist_ok=True)
            auth_manager = SpotifyOAuth(
                client_id=client_id,
                client_secret=client_secret,
                redirect_uri=redirect_uri,
                scope=self.SCOPE,
                cache_path=str(cache_path) if cache_path else None,
                open_browser=True,
            )
            client = spotipy.Spotify(auth_manager=auth_manager)

        self._client = client
        self._user_id: str | None = None

        logger.info("spotify_client_initialized")

    @property
    def user_id(self) -> str:
        """Get the current user's Spotify ID."""
        if not self._user_id:
            user = self._client.current_user()
            self._user_id = user["id"]
            logger.info("spotify_user_authenticated", user_id=self._user_id)
        return self._user_id

    def search_track(self, track: Track) -> str | None:
        """Search for a track on Spotify.

        Args:
            track: Track with title and artist

        Returns:
            Spotify ID of the first hit, or None if there is none
        """
        query = build_search_query(track)

        try:
            results = self._client.search(q=query, type="track", limit=1)
        except spotipy.SpotifyException as e:
            logger.error("track_search_failed", error=str(e), title=track.title, artist=track.artist)
            return None

        items = (results or {}).get("tracks", {}).get("items", [])
        if not items:
            logger.info("track_not_found", title=track.title, artist=track.artist)
            return None

        logger.info("track_found", title=track.title, artist=track.artist, id=items[0]["id"])
        return items[0]["id"]

    def create_playlist(
        self,
        name: str,
        description: str = "",
        public: bool = False,
    ) -> dict[str, Any]:
        """Create a new playlist.

        Args:
            name: Playlist name
            description: Playlist description
            public: Whether the playlist is public

        Returns:
            Playlist data dict with id and url

        Raises:
            PlaylistError: If Spotify rejects the request
        """
        logger.info("creating_playlist", name=name, public=public)

        try:
            playlist = self._client.user_playlist_create(
                user=self.user_id,
                name=name,
                public=public,
                description=description,
            )
        except spotipy.SpotifyException as e:
            logger.error("playlist_creation_failed", error=str(e), name=name)
            raise PlaylistError(f"failed to create playlist: {e}", {"name": name}) from e

        logger.info(
            "playlist_created",
            name=name,
            id=playlist["id"],
            url=playlist["external_urls"]["spotify"],
        )
        return playlist

    def add_tracks_to_playlist(
        self, playlist_id: str, track_ids: list[str], batch_size: int = MAX_BATCH_SIZE
    ) -> int:
        """Add tracks to a playlist in batches.

        Args:
            playlist_id: Spotify playlist ID
            track_ids: List of Spotify track IDs
            batch_size: Tracks per request, at most 100

        Returns:
            Number of tracks added

        Raises:
            PlaylistError: If a batch is rejected; earlier batches stay added
        """
        if not track_ids:
            return 0

        batch_size = max(1, min(batch_size, MAX_BATCH_SIZE))
        uris = [f"spotify:track:{tid}" for tid in track_ids]

        added = 0
        for i in range(0, len(uris), batch_size):
            batch = uris[i : i + batch_size]
            batch_num = i // batch_size + 1
            try:
                self._client.playlist_add_items(playlist_id, batch)
            except spotipy.SpotifyException as e:
                logger.error(
                    "add_tracks_failed",
                    error=str(e),
                    playlist_id=playlist_id,
                    batch_num=batch_num,
                )
                raise PlaylistError(
                    f"failed to add tracks to playlist: {e}",
                    {"playlist_id": playlist_id, "added": added},
                ) from e

            added += len(batch)
            logger.debug(
                "tracks_added_batch",
                playlist_id=playlist_id,
                batch_num=batch_num,
                count=len(batch),
            )

        logger.info("tracks_added", playlist_id=playlist_id, total=added)
        return added
