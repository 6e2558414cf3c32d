"""Template function contract and invocation."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, Mapping, Tuple, Type, TypeVar

from lingssg.core.exceptions import LingSsgError

from .args import ArgError, ArgParser

A = TypeVar("A")


class InvokeError(LingSsgError):
    """Base class for failures while invoking a template function."""


class InvokeArgError(InvokeError):
    """The call arguments could not be bound."""


class InvokeExecutionError(InvokeError):
    """The function itself failed."""


class Function(ABC, Generic[A]):
    """A typed function callable from templates.

    Subclasses parse their own arguments and declare which exception types
    count as ordinary call failures. Anything else is a bug and propagates.

    Example:
        class Shout(Function[str]):
            @classmethod
            def parse_args(cls, parser: ArgParser) -> str:
                return parser.retrieve("text", STRING)

            def call(self, args: str) -> str:
                return args.upper()

            def doc(self) -> str:
                return "shout(text:string) -> string"
    """

    errors: ClassVar[Tuple[Type[BaseException], ...]] = (LingSsgError,)

    @classmethod
    @abstractmethod
    def parse_args(cls, parser: ArgParser) -> A:
        ...

    @abstractmethod
    def call(self, args: A) -> Any:
        ...

    @abstractmethod
    def doc(self) -> str:
        ...


def invoke_function(fn_name: str, function: Function[Any], args: Mapping[str, Any]) -> Any:
    """Bind ``args`` and call ``function``.

    Raises:
        InvokeArgError: missing, mistyped or unexpected arguments
        InvokeExecutionError: the function raised one of its declared errors
    """
    parser = ArgParser(fn_name, args)
    try:
        parsed = function.parse_args(parser)
        parser.finish()
    except ArgError as err:
        raise InvokeArgError(f"invalid arguments for {fn_name}", context={"function": fn_name}) from err
    try:
        return function.call(parsed)
    except function.errors as err:
        raise InvokeExecutionError(f"{fn_name} failed", context={"function": fn_name}) from err


def format_invoke_error(fn_name: str, args: Mapping[str, Any], error: BaseException) -> str:
    """Describe a failed call and its cause chain for template error output."""
    rendered = ", ".join(f"{key}={value!r}" for key, value in args.items())
    lines = [f"error in {fn_name}({rendered}):"]
    source: BaseException | None = error
    while source is not None:
        lines.append(f"- caused by: {source}")
        source = source.__cause__
    return "\n".join(lines) + "\n"


__all__ = [
    "Function",
    "InvokeError",
    "InvokeArgError",
    "InvokeExecutionError",
    "invoke_function",
    "format_invoke_error",
]
