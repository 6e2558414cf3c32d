"""
lingssg transcode table command.

SUMMARY: List the code table
"""

from __future__ import annotations

import argparse

from lingssg.cli import OutputFormatter, add_json_flag
from lingssg.core.linguinput import Table, TableInitError

SUMMARY = "List the code table"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    try:
        table = Table.load()
    except TableInitError as e:
        formatter.error(e, error_code="table_error")
        return 1

    if formatter.json_mode:
        formatter.json_output(
            {
                "max_code_len": table.max_code_len,
                "entries": [{"code": code, "char": char} for code, char in table.items()],
            }
        )
        return 0

    width = max(len(code) for code, _ in table.items()) + 2
    for code, char in table.items():
        formatter.text(f"{{{code}}}".ljust(width + 2) + char)
    return 0
