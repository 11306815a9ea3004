"""Spotify module initialization."""

from .client import MAX_BATCH_SIZE, SpotifyClient, build_search_query

__all__ = [
    "MAX_BATCH_SIZE",
    "SpotifyClient",
    "build_search_query",
]
