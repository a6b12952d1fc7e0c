"""Delimiter tokenizer for notation strings.

Each :class:`Tokenizer` owns its cursor, so two parses never share scan
state even when they run concurrently or one happens inside another.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple


class Token(NamedTuple):
    """A slice of the source string: ``source[offset:offset + length]``."""

    offset: int
    length: int
    is_last: bool

    def text(self, source: str) -> str:
        return source[self.offset : self.offset + self.length]


class Tokenizer:
    """Yield successive delimiter-separated tokens of *text*.

    Empty tokens (leading, trailing or repeated delimiters) are returned
    with ``length == 0``; skipping them is up to the caller.
    """

    __slots__ = ("_text", "_delimiter", "_cursor", "_done")

    def __init__(self, text: str, delimiter: str = " ") -> None:
        if len(delimiter) != 1:
            raise ValueError(f"Delimiter must be a single character: {delimiter!r}")
        self._text = text
        self._delimiter = delimiter
        self._cursor = 0
        self._done = False

    @property
    def cursor(self) -> int:
        """Offset where the next scan starts."""
        return self._cursor

    def next_token(self) -> Token:
        """Scan from the cursor to the next delimiter or end of string."""
        if self._done:
            raise StopIteration
        offset = self._cursor
        end = self._text.find(self._delimiter, offset)
        is_last = end == -1
        if is_last:
            end = len(self._text)
            self._done = True
        self._cursor = end + 1
        return Token(offset, end - offset, is_last)

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        return self.next_token()


def tokenize(text: str, delimiter: str = " ") -> Iterator[Token]:
    """Generator over every token of *text*, the last one flagged."""
    yield from Tokenizer(text, delimiter)
