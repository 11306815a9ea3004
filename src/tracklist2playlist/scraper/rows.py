"""Track row extraction for a single inner table.

The extractor walks the tokens of one table with an explicit row state and
a column counter. Which column holds which field is data (``ColumnLayout``),
so the same state machine can be pointed at a different table layout.

Default layout of a track row::

    <tr>
      <td rowspan="..">..</td>    spacer, not counted
      <td>1. Title</td>           column 1
      <td>03:21</td>              column 2
      <td>..</td>                 column 3, ignored
      <td><b>Artist</b></td>      column 4
    </tr>
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, Field

from ..errors import NoRowsInTableError, StreamError, TextNotFoundError
from ..logging import get_logger
from ..models import Track
from .text import clean_text
from .tokens import Token, TokenKind

logger = get_logger(__name__)


class TrackField(str, Enum):
    TITLE = "title"
    DURATION = "duration"
    ARTIST = "artist"


class ColumnLayout(BaseModel):
    """Where the track fields live in the tracklist tables."""

    columns: dict[int, TrackField] = Field(
        default_factory=lambda: {
            1: TrackField.TITLE,
            2: TrackField.DURATION,
            4: TrackField.ARTIST,
        },
        description="1-indexed data column -> track field",
    )
    header_class: str = Field(default="album", description="Class marking album header rows")
    spacer_attr: str = Field(default="rowspan", description="Attribute marking spacer cells")
    artist_tag: str = Field(default="b", description="Tag wrapping the artist name")
    inner_table_attr: str = Field(default="cellspacing", description="Attribute marking inner tables")
    inner_table_value: str = Field(default="0", description="Value of inner_table_attr on inner tables")

    def field_for(self, column: int) -> TrackField | None:
        return self.columns.get(column)


class RowState(str, Enum):
    IDLE = "idle"
    IN_ROW = "in_row"


@dataclass
class ExtractionState:
    """Mutable state for one inner table."""

    track: Track = field(default_factory=Track)
    row_state: RowState = RowState.IDLE
    column: int = 0
    depth: int = 1

    def start_row(self) -> None:
        self.track = Track()
        self.row_state = RowState.IN_ROW
        self.column = 0

    def end_row(self) -> Track | None:
        """Close the current row, returning its track if it is complete."""
        completed = None
        if self.row_state is RowState.IN_ROW and self.track.is_complete():
            completed = self.track
        self.track = Track()
        self.row_state = RowState.IDLE
        return completed


def next_text(tokens: Iterator[Token]) -> str:
    """Read the next token, which must be text.

    Raises:
        TextNotFoundError: If the next token is a tag or the stream has ended
    """
    token = next(tokens, None)
    if token is None:
        raise TextNotFoundError("end of stream")
    if not token.is_text:
        raise TextNotFoundError(f"{token.kind.value}:{token.name}")
    return token.data


def read_title(tokens: Iterator[Token], layout: ColumnLayout) -> str:
    # "12. Title" -> "Title"; without a number there is no title
    text = clean_text(next_text(tokens))
    if "." not in text:
        return ""
    return clean_text(text.split(".", 1)[1])


def read_duration(tokens: Iterator[Token], layout: ColumnLayout) -> str:
    text = clean_text(next_text(tokens))
    return text if ":" in text else ""


def read_artist(tokens: Iterator[Token], layout: ColumnLayout) -> str:
    for token in tokens:
        if token.is_start(layout.artist_tag):
            return clean_text(next_text(tokens))
    return ""


def skip_cell(tokens: Iterator[Token], layout: ColumnLayout) -> str:
    return next_text(tokens)


FieldReader = Callable[[Iterator[Token], ColumnLayout], str]

FIELD_READERS: dict[TrackField, FieldReader] = {
    TrackField.TITLE: read_title,
    TrackField.DURATION: read_duration,
    TrackField.ARTIST: read_artist,
}


class RowExtractor:
    """Extracts tracks from the rows of one inner table."""

    def __init__(self, layout: ColumnLayout | None = None):
        self.layout = layout or ColumnLayout()

    def extract(self, tokens: Iterator[Token]) -> list[Track]:
        """Consume tokens up to the end of the current table.

        ``tokens`` must be positioned right after the table's start tag.

        Args:
            tokens: Shared token iterator, advanced in place

        Returns:
            Tracks in row order

        Raises:
            NoRowsInTableError: If the table ended without a complete row
            StreamError: If the stream failed or ended before the table did
                and no track had been collected yet
        """
        state = ExtractionState()
        tracks: list[Track] = []

        try:
            while state.depth > 0:
                token = next(tokens)
                if token.kind is TokenKind.START_TAG:
                    self._on_start_tag(token, tokens, state)
                elif token.kind is TokenKind.END_TAG:
                    self._on_end_tag(token, state, tracks)
        except StopIteration:
            return self._salvage(
                tracks, StreamError("stream ended inside table", end_of_stream=True)
            )
        except StreamError as e:
            return self._salvage(tracks, e)

        logger.debug("table_end", tracks=len(tracks))
        if not tracks:
            raise NoRowsInTableError()
        return tracks

    def _on_start_tag(self, token: Token, tokens: Iterator[Token], state: ExtractionState) -> None:
        if token.name == "table":
            state.depth += 1
            logger.debug("table_depth_increased", depth=state.depth)
        elif token.name == "tr":
            if token.has_class(self.layout.header_class):
                logger.debug("header_row_skipped")
                return
            state.start_row()
            logger.debug("track_row_started")
        elif token.name == "td":
            if state.row_state is not RowState.IN_ROW:
                return
            if token.has_attr(self.layout.spacer_attr):
                return
            state.column += 1
            self._read_cell(tokens, state)

    def _read_cell(self, tokens: Iterator[Token], state: ExtractionState) -> None:
        track_field = self.layout.field_for(state.column)
        reader = FIELD_READERS[track_field] if track_field is not None else skip_cell

        try:
            value = reader(tokens, self.layout)
        except TextNotFoundError as e:
            logger.debug("cell_text_missing", column=state.column, found=e.details.get("found"))
            return

        if track_field is not None:
            setattr(state.track, track_field.value, value)
            logger.debug("cell_read", column=state.column, field=track_field.value, value=value)

    def _on_end_tag(self, token: Token, state: ExtractionState, tracks: list[Track]) -> None:
        if token.name == "table":
            state.depth -= 1
            logger.debug("table_depth_decreased", depth=state.depth)
        elif token.name == "tr":
            track = state.end_row()
            if track is not None:
                logger.debug("track_row_added", title=track.title, artist=track.artist)
                tracks.append(track)

    def _salvage(self, tracks: list[Track], error: StreamError) -> list[Track]:
        if not tracks:
            raise error
        logger.warning(
            "table_truncated",
            tracks=len(tracks),
            end_of_stream=error.end_of_stream,
            error=str(error),
        )
        return tracks
