"""
lingssg transcode decode command.

SUMMARY: Decode Unicode symbols to bare codes

Each grapheme with a table entry is replaced by its code without braces, so
the output is readable ASCII rather than re-encodable input.
"""

from __future__ import annotations

import argparse

from lingssg.cli import OutputFormatter, add_input_args, add_json_flag, read_input
from lingssg.core.exceptions import LingSsgError
from lingssg.core.linguinput import decode

SUMMARY = "Decode Unicode symbols to bare codes"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_input_args(parser)
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    try:
        text = read_input(args)
        output = decode(text)
    except (LingSsgError, OSError, UnicodeDecodeError) as e:
        formatter.error(e, error_code="decode_error")
        return 1

    if formatter.json_mode:
        formatter.json_output({"input": text, "output": output})
    else:
        formatter.text(output)
    return 0
