"""Typed functions exposed to page templates.

A :class:`Function` parses its keyword arguments through an
:class:`ArgParser`, so argument mistakes in templates are reported with the
argument name and expected type instead of a Python ``TypeError``.
"""
from __future__ import annotations

from .args import (
    BOOL,
    FLOAT,
    INT,
    MISMATCH,
    STRING,
    ArgError,
    ArgParser,
    ArgType,
    MismatchedTypes,
    MissingArgument,
    UnknownArguments,
    enum_arg,
    optional,
)
from .base import (
    Function,
    InvokeArgError,
    InvokeError,
    InvokeExecutionError,
    format_invoke_error,
    invoke_function,
)
from .registry import FunctionRegistry

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
    "Function",
    "InvokeError",
    "InvokeArgError",
    "InvokeExecutionError",
    "invoke_function",
    "format_invoke_error",
    "FunctionRegistry",
]
