"""Table-depth scanner.

Walks the whole token stream once and hands every inner (track listing)
table to the row extractor. Layout and decoration tables are only counted.
"""

from collections.abc import Iterable

from ..errors import ExtractionError, NoTableFoundError
from ..logging import get_logger
from ..models import Track
from .rows import ColumnLayout, RowExtractor
from .tokens import Token

logger = get_logger(__name__)


def is_inner_table(token: Token, layout: ColumnLayout) -> bool:
    """Check if a table start tag opens a track listing table."""
    return token.attr(layout.inner_table_attr) == layout.inner_table_value


class TableScanner:
    """Collects tracks from every inner table of a document."""

    def __init__(self, layout: ColumnLayout | None = None, extractor: RowExtractor | None = None):
        self.layout = layout or ColumnLayout()
        self.extractor = extractor or RowExtractor(self.layout)

    def scan(self, tokens: Iterable[Token]) -> list[Track]:
        """Scan a token stream and return all tracks in document order.

        A table that fails to extract is logged and skipped.

        Raises:
            NoTableFoundError: If the stream ended without any track
            StreamError: If the stream failed
        """
        tokens = iter(tokens)
        all_tracks: list[Track] = []
        depth = 0
        tables = 0

        for token in tokens:
            if token.is_start("table"):
                depth += 1
                logger.debug("table_found", depth=depth)
                if not is_inner_table(token, self.layout):
                    continue

                tables += 1
                logger.debug("inner_table_found", depth=depth, table=tables)
                try:
                    tracks = self.extractor.extract(tokens)
                except ExtractionError as e:
                    logger.warning("inner_table_skipped", table=tables, error=str(e))
                    tracks = []
                finally:
                    # The extractor consumed the table's end tag
                    depth = max(depth - 1, 0)

                logger.debug("inner_table_done", table=tables, tracks=len(tracks))
                all_tracks.extend(tracks)

            elif token.is_end("table"):
                logger.debug("table_end", depth=depth)
                depth = max(depth - 1, 0)

        logger.debug("scan_complete", tables=tables, tracks=len(all_tracks))
        if not all_tracks:
            raise NoTableFoundError()
        return all_tracks
