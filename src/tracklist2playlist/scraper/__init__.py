"""Streaming extraction of tracks from nested HTML tables."""

from ..models import Track
from .rows import ColumnLayout, RowExtractor, TrackField
from .scanner import TableScanner, is_inner_table
from .text import clean_text
from .tokens import ByteSource, Token, TokenKind, TokenStream


def extract_tracks(
    source: ByteSource,
    layout: ColumnLayout | None = None,
    encoding: str = "utf-8",
) -> list[Track]:
    """Extract all tracks from one HTML document.

    Args:
        source: HTML as text, bytes, a file object or an iterable of chunks
        layout: Column layout of the track tables
        encoding: Encoding of byte input

    Returns:
        Non-empty list of tracks in document order
    """
    return TableScanner(layout).scan(TokenStream(source, encoding=encoding))


__all__ = [
    "ColumnLayout",
    "RowExtractor",
    "TableScanner",
    "Token",
    "TokenKind",
    "TokenStream",
    "TrackField",
    "clean_text",
    "extract_tracks",
    "is_inner_table",
]
