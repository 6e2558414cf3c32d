"""
lingssg transcode encode command.

SUMMARY: Encode {code} notation to Unicode symbols
"""

from __future__ import annotations

import argparse

from lingssg.cli import OutputFormatter, add_input_args, add_json_flag, read_input
from lingssg.core.exceptions import LingSsgError
from lingssg.core.linguinput import encode

SUMMARY = "Encode {code} notation to Unicode symbols"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_input_args(parser)
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    try:
        text = read_input(args)
        output = encode(text)
    except (LingSsgError, OSError, UnicodeDecodeError) as e:
        formatter.error(e, error_code="encode_error")
        return 1

    if formatter.json_mode:
        formatter.json_output({"input": text, "output": output})
    else:
        formatter.text(output)
    return 0
