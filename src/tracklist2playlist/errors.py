"""Custom exceptions for tracklist2playlist.

The extraction errors mirror the failure modes of the table scan; the
remaining ones cover the HTTP fetch, the flat track file and Spotify.
"""

from typing import Any


class Tracklist2PlaylistError(Exception):
    """Base exception for all tracklist2playlist errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Extraction
# =============================================================================


class ExtractionError(Tracklist2PlaylistError):
    """Base exception for HTML track extraction errors."""


class NoTableFoundError(ExtractionError):
    """The document ended without a single track from any inner table."""

    def __init__(self) -> None:
        super().__init__("no table found in HTML content")


class NoRowsInTableError(ExtractionError):
    """An inner table was matched but produced no valid rows."""

    def __init__(self) -> None:
        super().__init__("no rows found in table")


class StreamError(ExtractionError):
    """The token stream failed, or ended before the current table did."""

    def __init__(self, message: str, cause: BaseException | None = None, end_of_stream: bool = False) -> None:
        details: dict[str, Any] = {}
        if cause is not None:
            details["cause"] = repr(cause)
        super().__init__(message, details)
        self.cause = cause
        self.end_of_stream = end_of_stream


class TextNotFoundError(ExtractionError):
    """Expected a text token where a cell value should be."""

    def __init__(self, found: str) -> None:
        super().__init__("no text content found", {"found": found})


# =============================================================================
# Collaborators
# =============================================================================


class FetchError(Tracklist2PlaylistError):
    """The tracklist page could not be fetched."""


class TrackFileError(Tracklist2PlaylistError):
    """The flat track file could not be read or written."""


class PlaylistError(Tracklist2PlaylistError):
    """The Spotify playlist could not be created or populated."""
