"""Track source interface.

Anything that can produce a tracklist implements the TrackSource protocol.
"""

from typing import Protocol, runtime_checkable

from ..models import Track


@runtime_checkable
class TrackSource(Protocol):
    """Protocol for tracklist sources."""

    @property
    def name(self) -> str:
        """Identifier for this source, used in logs."""
        ...

    def fetch_tracks(self) -> list[Track]:
        """Fetch the full tracklist.

        Returns:
            Non-empty list of tracks in source order
        """
        ...
