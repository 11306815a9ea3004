"""Flat track file: one ``Artist - Title`` line per track.

The format does not escape the separator and drops the duration, so a
round trip loses durations and skips any track whose artist or title
contains `` - ``.
"""

from collections.abc import Iterable
from pathlib import Path

from .errors import TrackFileError
from .logging import get_logger
from .models import Track

logger = get_logger(__name__)

SEPARATOR = " - "


def format_track(track: Track) -> str:
    return f"{track.artist}{SEPARATOR}{track.title}"


def parse_line(line: str) -> Track | None:
    """Parse one line of a track file, or None if it is blank or invalid."""
    line = line.strip()
    if not line:
        return None

    parts = line.split(SEPARATOR)
    if len(parts) != 2:
        return None

    return Track(artist=parts[0].strip(), title=parts[1].strip())


def write_tracks(tracks: Iterable[Track], path: Path) -> int:
    """Write tracks to a file, replacing any previous content.

    Returns:
        Number of lines written
    """
    count = 0
    try:
        with path.open("w", encoding="utf-8", newline="\n") as f:
            for track in tracks:
                f.write(format_track(track) + "\n")
                count += 1
    except OSError as e:
        raise TrackFileError(f"failed to write tracks: {e}", {"path": str(path)}) from e

    logger.info("tracks_written", path=str(path), count=count)
    return count


def read_tracks(path: Path) -> list[Track]:
    """Read tracks from a file written by write_tracks.

    Raises:
        TrackFileError: If the file cannot be read or holds no valid line
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise TrackFileError(f"failed to read file: {e}", {"path": str(path)}) from e

    tracks: list[Track] = []
    for number, line in enumerate(content.split("\n"), 1):
        track = parse_line(line)
        if track is None:
            if line.strip():
                logger.debug("invalid_line_skipped", path=str(path), line=number)
            continue
        tracks.append(track)

    if not tracks:
        raise TrackFileError("no valid tracks found in file", {"path": str(path)})

    logger.info("tracks_read", path=str(path), count=len(tracks))
    return tracks
