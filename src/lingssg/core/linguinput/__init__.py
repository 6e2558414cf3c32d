"""Transcoding between ASCII ``{code}`` notation and Unicode symbols.

Usage:
    from lingssg.core.linguinput import encode, decode

    encode("h{e}l.o{U} {4}{2}{3}{2}")   # 'hɛl.oʊ ˦˨˧˨'
    decode("ɛ")                          # 'e'

``encode_to``/``decode_to`` write into any object with a ``write(str)``
method instead of returning a string.
"""
from __future__ import annotations

import io
from typing import TextIO

from .decoder import (
    Decoder,
    DecoderSinkError,
    DecoderTableError,
    DecodingError,
    iter_graphemes,
)
from .encoder import (
    CodeTooBig,
    Display,
    DisplayAdapter,
    DisplayFormat,
    Encodable,
    EncodableMixin,
    Encoder,
    EncoderSinkError,
    EncoderState,
    EncoderTableError,
    EncodingError,
    UnknownCode,
    UnmatchedClose,
    UnmatchedOpen,
    render_encoded,
)
from .table import DuplicatedChar, DuplicatedCode, Table, TableInitError


def encode(text: str) -> str:
    """Encode ``text`` into a new string."""
    buf = io.StringIO()
    encode_to(text, buf)
    return buf.getvalue()


def encode_to(text: str, sink: TextIO) -> None:
    """Encode ``text`` into ``sink`` and check that no code block is left open."""
    encoder = Encoder(sink)
    encoder.push_str(text)
    encoder.finish()


def decode(text: str) -> str:
    """Decode ``text`` into a new string."""
    buf = io.StringIO()
    decode_to(text, buf)
    return buf.getvalue()


def decode_to(text: str, sink: TextIO) -> None:
    Decoder(sink).push_str(text)


__all__ = [
    "encode",
    "encode_to",
    "decode",
    "decode_to",
    # Table
    "Table",
    "TableInitError",
    "DuplicatedCode",
    "DuplicatedChar",
    # Encoder
    "Encoder",
    "EncoderState",
    "EncodingError",
    "EncoderTableError",
    "EncoderSinkError",
    "UnmatchedOpen",
    "UnmatchedClose",
    "CodeTooBig",
    "UnknownCode",
    "Encodable",
    "EncodableMixin",
    "render_encoded",
    "Display",
    "DisplayAdapter",
    "DisplayFormat",
    # Decoder
    "Decoder",
    "DecodingError",
    "DecoderTableError",
    "DecoderSinkError",
    "iter_graphemes",
]
