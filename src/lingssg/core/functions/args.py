"""Typed argument extraction for template functions.

Template engines hand functions a flat mapping of keyword arguments holding
plain JSON-like values. :class:`ArgParser` pulls typed values out of that
mapping one name at a time and remembers which names were consumed, so that
unexpected arguments can be reported once parsing is done.

Example:
    parser = ArgParser("greet", {"name": "Ada", "loud": True})
    name = parser.retrieve("name", STRING)
    loud = parser.retrieve_with_default("loud", BOOL, False)
    parser.finish()
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Set, Type, TypeVar

from lingssg.core.exceptions import LingSsgError

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


class ArgError(LingSsgError):
    """Base class for argument binding failures."""


class MissingArgument(ArgError):
    def __init__(self, name: str) -> None:
        super().__init__(f"argument {name} is required but it is missing", context={"arg": name})
        self.arg = name


class MismatchedTypes(ArgError):
    def __init__(self, arg: str, ty: str) -> None:
        super().__init__(
            f"argument {arg} type should be {ty} but it is mismatched",
            context={"arg": arg, "type": ty},
        )
        self.arg = arg
        self.ty = ty


class UnknownArguments(ArgError):
    def __init__(self, fn_name: str, names: Iterable[str]) -> None:
        self.names = sorted(names)
        super().__init__(
            f"function {fn_name} was not expecting arguments {', '.join(self.names)} in this call",
            context={"function": fn_name, "args": self.names},
        )


class _Mismatch:
    """Sentinel returned by converters that reject a value."""


MISMATCH = _Mismatch()


@dataclass(frozen=True)
class ArgType:
    """A named converter from a raw argument value.

    ``convert`` returns the typed value, or :data:`MISMATCH` when the raw
    value does not have this type.
    """

    name: str
    convert: Callable[[Any], Any]


def _bool(value: Any) -> Any:
    return value if isinstance(value, bool) else MISMATCH


def _int(value: Any) -> Any:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return MISMATCH


def _float(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return MISMATCH


def _string(value: Any) -> Any:
    return value if isinstance(value, str) else MISMATCH


BOOL = ArgType("boolean", _bool)
INT = ArgType("int64", _int)
FLOAT = ArgType("float64", _float)
STRING = ArgType("string", _string)


def optional(inner: ArgType) -> ArgType:
    """Accept ``None`` in addition to ``inner``."""

    def convert(value: Any) -> Any:
        if value is None:
            return None
        return inner.convert(value)

    return ArgType(f"optional {inner.name}", convert)


def enum_arg(name: str, enum_cls: Type[E]) -> ArgType:
    """Accept the member names of ``enum_cls`` given as strings."""

    def convert(value: Any) -> Any:
        if isinstance(value, str) and value in enum_cls.__members__:
            return enum_cls[value]
        return MISMATCH

    return ArgType(name, convert)


class ArgParser:
    """Consume named arguments for a single function call."""

    def __init__(self, fn_name: str, args: Mapping[str, Any]) -> None:
        self.fn_name = fn_name
        self._args = args
        self._unknown: Set[str] = set(args.keys())

    def _convert(self, name: str, arg_type: ArgType, raw: Any) -> Any:
        value = arg_type.convert(raw)
        if value is MISMATCH:
            raise MismatchedTypes(name, arg_type.name)
        return value

    def retrieve(self, name: str, arg_type: ArgType) -> Any:
        """Return a required argument.

        Raises:
            MissingArgument: ``name`` was not passed
            MismatchedTypes: the value does not have ``arg_type``
        """
        if name not in self._args:
            raise MissingArgument(name)
        value = self._convert(name, arg_type, self._args[name])
        self._unknown.discard(name)
        return value

    def retrieve_with_default(self, name: str, arg_type: ArgType, default: Any) -> Any:
        """Return an optional argument, or ``default`` (called if callable) when absent."""
        if name in self._args:
            value = self._convert(name, arg_type, self._args[name])
        else:
            value = default() if callable(default) else default
        self._unknown.discard(name)
        return value

    def finish(self) -> None:
        """Raise :class:`UnknownArguments` if some passed names were never retrieved."""
        if self._unknown:
            raise UnknownArguments(self.fn_name, self._unknown)


__all__ = [
    "ArgError",
    "MissingArgument",
    "MismatchedTypes",
    "UnknownArguments",
    "ArgType",
    "MISMATCH",
    "BOOL",
    "INT",
    "FLOAT",
    "STRING",
    "optional",
    "enum_arg",
    "ArgParser",
]
