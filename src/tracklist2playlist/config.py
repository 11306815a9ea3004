"""Configuration settings using pydantic-settings for environment variable loading."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .scraper.rows import ColumnLayout

DEFAULT_SOURCE_URL = "https://www.zenial.nl/html/variourf.htm"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Automatically reads from .env file and environment variables.
    Environment variables take precedence over .env file. Nested values
    such as ``COLUMN_LAYOUT`` are given as JSON.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Spotify OAuth - only needed for playlist creation
    spotify_client_id: str = ""
    spotify_client_secret: str = ""
    spotify_redirect_uri: str = "http://127.0.0.1:8888/callback"
    token_cache_path: Path = Field(
        default_factory=lambda: Path.home() / ".tracklist2playlist" / ".spotify_cache"
    )

    # Scraping
    source_url: str = DEFAULT_SOURCE_URL
    request_timeout: float = Field(default=30.0, gt=0)
    column_layout: ColumnLayout = Field(default_factory=ColumnLayout)

    # Track file
    tracks_file: Path = Path("tracks.txt")

    # Playlist
    playlist_public: bool = False
    batch_size: int = Field(default=100, ge=1, le=100)

    # Logging
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    @property
    def has_spotify_credentials(self) -> bool:
        return bool(self.spotify_client_id and self.spotify_client_secret)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
