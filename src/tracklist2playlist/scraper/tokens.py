"""Pull-based HTML tokenizer.

Wraps the standard library's push parser so the scanner can ask for one
token at a time. Nothing is kept once a token has been handed out; there is
no tree.
"""

import codecs
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from html.parser import HTMLParser
from typing import IO, Union

from ..errors import StreamError

ByteSource = Union[str, bytes, IO[bytes], IO[str], Iterable[bytes], Iterable[str]]


class TokenKind(str, Enum):
    START_TAG = "start_tag"
    END_TAG = "end_tag"
    TEXT = "text"


@dataclass
class Token:
    """A single tag or text run from the document."""

    kind: TokenKind
    name: str = ""
    attrs: dict[str, str | None] = field(default_factory=dict)
    data: str = ""

    def is_start(self, name: str) -> bool:
        return self.kind is TokenKind.START_TAG and self.name == name

    def is_end(self, name: str) -> bool:
        return self.kind is TokenKind.END_TAG and self.name == name

    @property
    def is_text(self) -> bool:
        return self.kind is TokenKind.TEXT

    def has_attr(self, key: str) -> bool:
        return key in self.attrs

    def attr(self, key: str) -> str | None:
        return self.attrs.get(key)

    def has_class(self, name: str) -> bool:
        """Check if the class attribute is exactly ``name``."""
        return self.attrs.get("class") == name


class _TokenCollector(HTMLParser):
    """Turns HTMLParser callbacks into queued tokens.

    Adjacent text runs are merged, so a text token never depends on where
    the input happened to be split into chunks. Comments and declarations
    are not queued but still end the current text run.
    """

    def __init__(self, sink: deque[Token]):
        super().__init__(convert_charrefs=True)
        self.sink = sink
        self._text_open = False

    def handle_starttag(self, tag, attrs):
        self._text_open = False
        self.sink.append(Token(TokenKind.START_TAG, name=tag, attrs=dict(attrs)))

    def handle_endtag(self, tag):
        self._text_open = False
        self.sink.append(Token(TokenKind.END_TAG, name=tag))

    def handle_data(self, data):
        if self._text_open and self.sink and self.sink[-1].is_text:
            self.sink[-1].data += data
        else:
            self.sink.append(Token(TokenKind.TEXT, data=data))
        self._text_open = True

    def handle_comment(self, data):
        self._text_open = False

    def handle_decl(self, decl):
        self._text_open = False

    def handle_pi(self, data):
        self._text_open = False


def _iter_chunks(source: ByteSource, chunk_size: int) -> Iterator[bytes | str]:
    if isinstance(source, (str, bytes)):
        yield source
    elif hasattr(source, "read"):
        while True:
            chunk = source.read(chunk_size)
            if not chunk:
                return
            yield chunk
    else:
        yield from source


class TokenStream:
    """Forward-only token cursor over one HTML document.

    ``next()`` returns the next token, raises ``StopIteration`` at the end of
    the document and ``StreamError`` if reading the source failed. Both
    outcomes are sticky: once reached, every further call repeats them.
    """

    def __init__(self, source: ByteSource, encoding: str = "utf-8", chunk_size: int = 8192):
        self._chunks = _iter_chunks(source, chunk_size)
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
        self._pending: deque[Token] = deque()
        self._parser = _TokenCollector(self._pending)
        self._cause: BaseException | None = None
        self._finished = False

    def __iter__(self) -> "TokenStream":
        return self

    def __next__(self) -> Token:
        while self._needs_input():
            self._pull()
        if self._pending:
            return self._pending.popleft()
        if self._cause is not None:
            raise StreamError(f"tokenizer error: {self._cause}", cause=self._cause) from self._cause
        raise StopIteration

    def _needs_input(self) -> bool:
        if self._finished:
            return False
        if not self._pending:
            return True
        # A trailing text run may continue in the next chunk
        return len(self._pending) == 1 and self._pending[0].is_text

    def _pull(self) -> None:
        try:
            chunk = next(self._chunks)
        except StopIteration:
            self._finish()
            return
        except Exception as e:
            self._cause = e
            self._finish()
            return

        if isinstance(chunk, bytes):
            chunk = self._decoder.decode(chunk)
        self._parser.feed(chunk)

    def _finish(self) -> None:
        self._parser.feed(self._decoder.decode(b"", final=True))
        self._parser.close()
        self._finished = True
