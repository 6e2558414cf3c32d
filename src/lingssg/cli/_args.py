"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_repo_root_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--repo-root",
        type=str,
        help="Override project root path (default: current directory)",
    )


def add_input_args(parser: argparse.ArgumentParser) -> None:
    """Add a positional TEXT and a ``--file`` alternative for transcoding commands."""
    parser.add_argument(
        "text",
        nargs="?",
        help="Text to transcode (reads --file or stdin when omitted)",
    )
    parser.add_argument(
        "--file",
        type=str,
        help="Read input from a UTF-8 file",
    )


__all__ = ["add_json_flag", "add_repo_root_flag", "add_input_args"]
