"""
Tests for the pull-based HTML token stream.
"""

import io

import pytest

from tracklist2playlist.errors import StreamError
from tracklist2playlist.scraper import Token, TokenKind, TokenStream


def kinds(stream):
    return [(t.kind, t.name or t.data) for t in stream]


class TestToken:
    """Test Token helpers."""

    def test_start_and_end(self):
        start = Token(TokenKind.START_TAG, name="table", attrs={"cellspacing": "0"})
        end = Token(TokenKind.END_TAG, name="table")

        assert start.is_start("table")
        assert not start.is_end("table")
        assert end.is_end("table")
        assert start.attr("cellspacing") == "0"
        assert start.attr("border") is None

    def test_valueless_attribute(self):
        token = Token(TokenKind.START_TAG, name="td", attrs={"rowspan": None})
        assert token.has_attr("rowspan")

    def test_has_class(self):
        token = Token(TokenKind.START_TAG, name="tr", attrs={"class": "album"})
        assert token.has_class("album")
        assert not token.has_class("alb")
        assert not Token(TokenKind.START_TAG, name="tr", attrs={"class": "album odd"}).has_class("album")
        assert not Token(TokenKind.START_TAG, name="tr").has_class("album")


class TestTokenStream:
    """Test TokenStream over the different source types."""

    def test_tokens_in_order(self):
        stream = TokenStream('<TD RowSpan="2">a &amp; b</td>')
        tokens = list(stream)

        assert [t.kind for t in tokens] == [TokenKind.START_TAG, TokenKind.TEXT, TokenKind.END_TAG]
        assert tokens[0].name == "td"
        assert tokens[0].attrs == {"rowspan": "2"}
        assert tokens[1].data == "a & b"

    def test_comments_and_doctype_are_dropped(self):
        stream = TokenStream("<!DOCTYPE html><!-- note --><b>x</b>")
        assert kinds(stream) == [
            (TokenKind.START_TAG, "b"),
            (TokenKind.TEXT, "x"),
            (TokenKind.END_TAG, "b"),
        ]

    def test_comment_ends_text_run(self):
        stream = TokenStream("<td>1. Song<!-- x --> Two</td>")
        assert [t.data for t in stream if t.is_text] == ["1. Song", " Two"]

    def test_text_around_doctype_is_not_merged(self):
        stream = TokenStream("a<!DOCTYPE html>b")
        assert [t.data for t in stream] == ["a", "b"]

    def test_text_split_across_chunks_is_one_token(self):
        stream = TokenStream(iter(["<td>1. So", "ng ", "One</td>"]))
        tokens = list(stream)

        assert [t.data for t in tokens if t.is_text] == ["1. Song One"]

    def test_multibyte_split_across_chunks(self):
        data = "<b>Beyoncé</b>".encode("utf-8")
        cut = data.index(b"\xc3") + 1
        stream = TokenStream(iter([data[:cut], data[cut:]]))

        assert [t.data for t in stream if t.is_text] == ["Beyoncé"]

    def test_binary_file_object(self):
        stream = TokenStream(io.BytesIO(b"<p>hi</p>"), chunk_size=2)
        assert kinds(stream) == [
            (TokenKind.START_TAG, "p"),
            (TokenKind.TEXT, "hi"),
            (TokenKind.END_TAG, "p"),
        ]

    def test_end_of_stream_is_sticky(self):
        stream = TokenStream(b"<p>")
        assert next(stream).is_start("p")
        with pytest.raises(StopIteration):
            next(stream)
        with pytest.raises(StopIteration):
            next(stream)

    def test_read_error_after_pending_tokens(self):
        def chunks():
            yield "<p>partial"
            raise OSError("connection reset")

        stream = TokenStream(chunks())

        assert next(stream).is_start("p")
        assert next(stream).data == "partial"
        with pytest.raises(StreamError) as exc_info:
            next(stream)
        assert isinstance(exc_info.value.cause, OSError)
        assert not exc_info.value.end_of_stream

        # Sticky: the same failure is reported again
        with pytest.raises(StreamError):
            next(stream)
