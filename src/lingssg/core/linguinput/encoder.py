"""ASCII code to Unicode encoder.

The encoder is a push-based scanner bound to a text sink. Characters outside
``{...}`` blocks are copied through; a ``{code}`` block is replaced by the
table symbol for ``code``. ``{{`` and ``}}`` escape literal braces.

Transitions:

    DEFAULT  + "{"                -> OPENING
    DEFAULT  + "}"                -> CLOSING
    DEFAULT  + other              -> emit, DEFAULT
    OPENING  + "{" (empty buffer) -> emit "{", DEFAULT
    OPENING  + "}"                -> emit symbol or UnknownCode, DEFAULT
    OPENING  + other              -> append, or CodeTooBig past max_code_len
    CLOSING  + "}"                -> emit "}", DEFAULT
    CLOSING  + other              -> UnmatchedClose

Output already written to the sink is not rolled back when a push fails.
"""
from __future__ import annotations

import io
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Protocol, TextIO, TypeVar, runtime_checkable

from lingssg.core.exceptions import LingSsgError

from .table import Table, TableInitError

F = TypeVar("F")
F_contra = TypeVar("F_contra", contravariant=True)


class EncodingError(LingSsgError):
    """Base class for encoding failures."""


class EncoderTableError(EncodingError):
    """The code table failed to initialize."""

    def __init__(self, error: TableInitError) -> None:
        super().__init__(str(error), context=error.context)


class EncoderSinkError(EncodingError):
    """The output sink rejected encoded data."""

    def __init__(self) -> None:
        super().__init__("Error formatting encoded data")


class UnmatchedOpen(EncodingError):
    def __init__(self) -> None:
        super().__init__("Unmatched '{'")


class UnmatchedClose(EncodingError):
    def __init__(self) -> None:
        super().__init__("Unmatched '}'")


class CodeTooBig(EncodingError):
    def __init__(self, code: str) -> None:
        super().__init__(f"Code {code} is too big", context={"code": code})
        self.code = code


class UnknownCode(EncodingError):
    def __init__(self, code: str) -> None:
        super().__init__(f"Unknown code {code}", context={"code": code})
        self.code = code


class EncoderState(Enum):
    DEFAULT = "default"
    OPENING = "opening"
    CLOSING = "closing"


class Encoder:
    """Encode pushed characters into ``sink``.

    Example:
        >>> buf = io.StringIO()
        >>> Encoder(buf).push_str("h{e}").finish()
        >>> buf.getvalue()
        'hɛ'
    """

    def __init__(self, sink: TextIO) -> None:
        try:
            self._table = Table.load()
        except TableInitError as err:
            raise EncoderTableError(err) from err
        self._buf: list[str] = []
        self._buf_len = 0
        self._state = EncoderState.DEFAULT
        self._sink = sink

    @property
    def state(self) -> EncoderState:
        return self._state

    @property
    def sink(self) -> TextIO:
        return self._sink

    def _emit(self, text: str) -> None:
        try:
            self._sink.write(text)
        except (OSError, ValueError, TypeError) as err:
            raise EncoderSinkError() from err

    def _reset(self) -> None:
        self._buf.clear()
        self._buf_len = 0
        self._state = EncoderState.DEFAULT

    def push(self, ch: str) -> "Encoder":
        """Feed a single character.

        Raises:
            UnknownCode, CodeTooBig, UnmatchedClose, EncoderSinkError
        """
        state = self._state
        if state is EncoderState.DEFAULT:
            if ch == "{":
                self._state = EncoderState.OPENING
            elif ch == "}":
                self._state = EncoderState.CLOSING
            else:
                self._emit(ch)
        elif state is EncoderState.OPENING:
            if ch == "{" and not self._buf:
                self._emit(ch)
                self._state = EncoderState.DEFAULT
            elif ch == "}":
                code = "".join(self._buf)
                symbol = self._table.code_to_char(code)
                if symbol is None:
                    raise UnknownCode(code)
                self._emit(symbol)
                self._reset()
            else:
                size = len(ch.encode("utf-8"))
                if self._buf_len + size > self._table.max_code_len:
                    raise CodeTooBig("".join(self._buf) + ch)
                self._buf.append(ch)
                self._buf_len += size
        else:
            if ch == "}" and not self._buf:
                self._emit(ch)
                self._state = EncoderState.DEFAULT
            else:
                raise UnmatchedClose()
        return self

    def push_str(self, content: str) -> "Encoder":
        """Feed every character of ``content``, stopping at the first error."""
        for ch in content:
            self.push(ch)
        return self

    def write(self, content: str) -> int:
        """File-like alias for :meth:`push_str` so ``print(..., file=encoder)`` works."""
        self.push_str(content)
        return len(content)

    def encode(self, value: "Encodable[F]", fmt: F) -> "Encoder":
        """Let ``value`` render itself into this encoder under ``fmt``."""
        value.encode_into(fmt, self)
        return self

    def finish(self) -> None:
        """Check that no code block is left open.

        Raises:
            UnmatchedOpen: input ended inside ``{...``
            UnmatchedClose: input ended after a lone ``}``
        """
        if self._state is EncoderState.OPENING:
            raise UnmatchedOpen()
        if self._state is EncoderState.CLOSING:
            raise UnmatchedClose()


@runtime_checkable
class Encodable(Protocol[F_contra]):
    """A value that knows how to push itself into an :class:`Encoder`."""

    def encode_into(self, fmt: F_contra, encoder: Encoder) -> None:
        ...


def render_encoded(value: Encodable[F], fmt: F) -> str:
    """Encode ``value`` into a fresh string; nothing is returned on failure."""
    buf = io.StringIO()
    encoder = Encoder(buf)
    value.encode_into(fmt, encoder)
    return buf.getvalue()


class EncodableMixin(Generic[F]):
    """Adds :meth:`render_encoded` to classes implementing ``encode_into``."""

    def render_encoded(self, fmt: F) -> str:
        return render_encoded(self, fmt)  # type: ignore[arg-type]


@dataclass(frozen=True)
class DisplayFormat:
    """Format tag for values rendered through ``str()``."""


@dataclass(frozen=True)
class Display(EncodableMixin[DisplayFormat]):
    """Encode ``str(value)`` as encoder input."""

    value: Any

    def encode_into(self, fmt: DisplayFormat, encoder: Encoder) -> None:
        encoder.push_str(str(self.value))


@dataclass(frozen=True)
class DisplayAdapter(EncodableMixin[DisplayFormat], Generic[F]):
    """Expose an encodable for format ``fmt`` under :class:`DisplayFormat`."""

    value: Encodable[F]
    fmt: F

    def encode_into(self, fmt: DisplayFormat, encoder: Encoder) -> None:
        self.value.encode_into(self.fmt, encoder)


__all__ = [
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
]
