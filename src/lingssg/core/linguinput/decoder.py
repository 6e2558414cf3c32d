"""Unicode symbol to ASCII code decoder.

Decoding works one extended grapheme cluster at a time: a grapheme that is a
table symbol is replaced by its bare code (no ``{}`` delimiters), anything
else is copied through unchanged.
"""
from __future__ import annotations

from typing import Iterator, TextIO

import regex

from lingssg.core.exceptions import LingSsgError

from .table import Table, TableInitError

_GRAPHEME_RE = regex.compile(r"\X")


class DecodingError(LingSsgError):
    """Base class for decoding failures."""


class DecoderTableError(DecodingError):
    """The code table failed to initialize."""

    def __init__(self, error: TableInitError) -> None:
        super().__init__(str(error), context=error.context)


class DecoderSinkError(DecodingError):
    """The output sink rejected decoded data."""

    def __init__(self) -> None:
        super().__init__("Error formatting decoded data")


def iter_graphemes(text: str) -> Iterator[str]:
    """Yield the extended grapheme clusters of ``text``."""
    for match in _GRAPHEME_RE.finditer(text):
        yield match.group()


class Decoder:
    """Decode pushed graphemes into ``sink``."""

    def __init__(self, sink: TextIO) -> None:
        try:
            self._table = Table.load()
        except TableInitError as err:
            raise DecoderTableError(err) from err
        self._sink = sink

    @property
    def sink(self) -> TextIO:
        return self._sink

    def push(self, grapheme: str) -> "Decoder":
        code = self._table.char_to_code(grapheme)
        try:
            self._sink.write(grapheme if code is None else code)
        except (OSError, ValueError, TypeError) as err:
            raise DecoderSinkError() from err
        return self

    def push_str(self, content: str) -> "Decoder":
        for grapheme in iter_graphemes(content):
            self.push(grapheme)
        return self


__all__ = [
    "Decoder",
    "DecodingError",
    "DecoderTableError",
    "DecoderSinkError",
    "iter_graphemes",
]
