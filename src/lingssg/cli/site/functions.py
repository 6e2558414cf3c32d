"""
lingssg site functions command.

SUMMARY: List template functions or show one's documentation
"""

from __future__ import annotations

import argparse

from lingssg.cli import OutputFormatter, add_json_flag, add_repo_root_flag, create_site, get_repo_root
from lingssg.core.exceptions import LingSsgError

SUMMARY = "List template functions or show one's documentation"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "name",
        nargs="?",
        help="Function to document (lists all functions when omitted)",
    )
    add_repo_root_flag(parser)
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    try:
        ssg = create_site(get_repo_root(args))
    except LingSsgError as e:
        formatter.error(e, error_code="config_error")
        return 1

    if args.name:
        doc = ssg.doc(args.name)
        if doc is None:
            formatter.error(LookupError(f"Unknown function {args.name}"), error_code="unknown_function")
            return 1
        if formatter.json_mode:
            formatter.json_output({"name": args.name, "doc": doc})
        else:
            formatter.text(doc)
        return 0

    names = ssg.functions()
    if formatter.json_mode:
        formatter.json_output({"functions": names})
    else:
        for name in names:
            formatter.text(name)
    return 0
