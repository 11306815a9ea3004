"""Pydantic data models for tracklist2playlist."""

from pydantic import BaseModel, Field


class Track(BaseModel):
    """A track scraped from the tracklist page.

    Only tracks with both a title and an artist leave the extractor.
    """

    title: str = Field(default="", description="Track title without its leading number")
    artist: str = Field(default="", description="Performing artist")
    duration: str = Field(default="", description="Duration as printed (mm:ss), empty if absent")

    def is_complete(self) -> bool:
        """Check if this track has both a title and an artist."""
        return bool(self.title) and bool(self.artist)


class Album(BaseModel):
    """An album grouping of tracks.

    Part of the data model but not populated by the extractor yet.
    """

    title: str = Field(description="Album title")
    year: str = Field(default="", description="Release year as printed")
    tracks: list[Track] = Field(default_factory=list)


class PlaylistResult(BaseModel):
    """Final output of the playlist creation process."""

    playlist_id: str = Field(description="Spotify playlist ID")
    playlist_url: str = Field(description="Spotify playlist URL")
    playlist_name: str = Field(description="Name of the created playlist")
    tracks_added: int = Field(description="Number of tracks added to the playlist")

    found: list[Track] = Field(default_factory=list, description="Tracks matched on Spotify")
    not_found: list[Track] = Field(
        default_factory=list, description="Tracks with no Spotify search hit"
    )
