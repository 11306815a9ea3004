"""tracklist2playlist CLI using Typer.

Commands:
- scrape: Extract tracks from the tracklist page into a track file
- show: List the tracks in a track file
- create: Create a playlist from a track file
- run: Scrape and create a playlist in one go
"""

from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer

from .config import get_settings
from .errors import Tracklist2PlaylistError
from .logging import configure_logging, get_logger
from .models import PlaylistResult, Track
from .pipeline import Pipeline

app = typer.Typer(
    name="tracklist2playlist",
    help="Scrape a tracklist page into a Spotify playlist.",
    add_completion=False,
)

LogLevel = Annotated[
    Optional[str], typer.Option("--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)")
]
LogFormat = Annotated[Optional[str], typer.Option("--log-format", help="Log format (console, json)")]
TracksFile = Annotated[
    Optional[Path], typer.Option("--file", "-f", help="Track file (default: TRACKS_FILE)")
]


def _setup(log_level: str | None, log_format: str | None) -> Pipeline:
    settings = get_settings()
    configure_logging(
        level=log_level or settings.log_level,
        format=log_format or settings.log_format,
    )
    return Pipeline(settings)


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(1)


def _print_result(result: PlaylistResult, output_json: Path | None) -> None:
    typer.echo()
    typer.echo("=" * 60)
    typer.echo("PLAYLIST CREATED SUCCESSFULLY")
    typer.echo("=" * 60)
    typer.echo()
    typer.echo(f"Playlist '{result.playlist_name}' created with {result.tracks_added} tracks")
    typer.echo(f"URL: {result.playlist_url}")

    if result.not_found:
        typer.echo()
        typer.echo(f"Not found on Spotify: {len(result.not_found)}")
        for track in result.not_found[:10]:
            typer.echo(f"  - {track.artist} - {track.title}")
        if len(result.not_found) > 10:
            typer.echo(f"  ... and {len(result.not_found) - 10} more")

    if output_json:
        output_json.write_text(result.model_dump_json(indent=2), encoding="utf-8")
        typer.echo(f"Results written to: {output_json}")


def _create(
    pipeline: Pipeline,
    tracks: list[Track],
    name: str,
    description: str,
    public: bool | None,
    output_json: Path | None,
) -> None:
    logger = get_logger(__name__)
    try:
        result = pipeline.create_playlist(tracks, name, description, public)
    except Tracklist2PlaylistError as e:
        _fail(str(e))
    except Exception as e:
        logger.exception("pipeline_failed", error=str(e))
        _fail(f"Pipeline failed - {e}")
    else:
        _print_result(result, output_json)


@app.command()
def scrape(
    url: Annotated[Optional[str], typer.Option("--url", "-u", help="Tracklist page (default: SOURCE_URL)")] = None,
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Track file to write (default: TRACKS_FILE)")] = None,
    log_level: LogLevel = None,
    log_format: LogFormat = None,
) -> None:
    """Extract tracks from the tracklist page and write them to a track file."""
    pipeline = _setup(log_level, log_format)

    try:
        if url:
            with pipeline.page_source(url) as page:
                tracks = pipeline.scrape(page)
        else:
            tracks = pipeline.scrape()
        path = pipeline.save(tracks, output)
    except Tracklist2PlaylistError as e:
        _fail(str(e))

    typer.echo(f"{len(tracks)} tracks written to {path}")


@app.command()
def show(
    file: TracksFile = None,
    log_level: LogLevel = None,
    log_format: LogFormat = None,
) -> None:
    """List the tracks in a track file."""
    pipeline = _setup(log_level, log_format)

    try:
        tracks = pipeline.load(file)
    except Tracklist2PlaylistError as e:
        _fail(str(e))

    for i, track in enumerate(tracks, 1):
        typer.echo(f"{i}. {track.artist} - {track.title}")
    typer.echo()
    typer.echo(f"{len(tracks)} tracks")


@app.command()
def create(
    name: Annotated[str, typer.Option("--name", "-n", prompt="Enter playlist name", help="Name for the Spotify playlist")],
    description: Annotated[str, typer.Option("--description", "-d", prompt="Enter playlist description", help="Playlist description")] = "",
    file: TracksFile = None,
    public: Annotated[Optional[bool], typer.Option("--public/--private", help="Playlist visibility (default: PLAYLIST_PUBLIC)")] = None,
    output_json: Annotated[Optional[Path], typer.Option("--output", "-o", help="Output JSON file for results")] = None,
    log_level: LogLevel = None,
    log_format: LogFormat = None,
) -> None:
    """Create a Spotify playlist from the tracks in a track file.

    Example:
        tracklist2playlist create --name "Various" --description "Scraped"
    """
    pipeline = _setup(log_level, log_format)

    try:
        tracks = pipeline.load(file)
    except Tracklist2PlaylistError as e:
        _fail(str(e))

    typer.echo(f"Creating playlist '{name}' from {len(tracks)} tracks")
    _create(pipeline, tracks, name, description, public, output_json)


@app.command()
def run(
    name: Annotated[str, typer.Option("--name", "-n", prompt="Enter playlist name", help="Name for the Spotify playlist")],
    description: Annotated[str, typer.Option("--description", "-d", prompt="Enter playlist description", help="Playlist description")] = "",
    url: Annotated[Optional[str], typer.Option("--url", "-u", help="Tracklist page (default: SOURCE_URL)")] = None,
    public: Annotated[Optional[bool], typer.Option("--public/--private", help="Playlist visibility (default: PLAYLIST_PUBLIC)")] = None,
    output_json: Annotated[Optional[Path], typer.Option("--output", "-o", help="Output JSON file for results")] = None,
    log_level: LogLevel = None,
    log_format: LogFormat = None,
) -> None:
    """Scrape the tracklist page and create a playlist without a track file."""
    pipeline = _setup(log_level, log_format)

    try:
        if url:
            with pipeline.page_source(url) as page:
                tracks = pipeline.scrape(page)
        else:
            tracks = pipeline.scrape()
    except Tracklist2PlaylistError as e:
        _fail(str(e))

    typer.echo(f"Scraped {len(tracks)} tracks, creating playlist '{name}'")
    _create(pipeline, tracks, name, description, public, output_json)


def main() -> None:
    """CLI entry point."""
    app()
