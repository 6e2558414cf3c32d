"""
lingssg site build command.

SUMMARY: Build the site into the output directory

Loads the project configuration, installs the active packs, compiles every
page and copies the assets. The output directory is emptied first.
"""

from __future__ import annotations

import argparse

from lingssg.cli import OutputFormatter, add_json_flag, add_repo_root_flag, create_site, get_repo_root
from lingssg.core.exceptions import LingSsgError

SUMMARY = "Build the site into the output directory"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_repo_root_flag(parser)
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    try:
        ssg = create_site(get_repo_root(args))
        ssg.build()
    except LingSsgError as e:
        formatter.error(e, error_code="build_error")
        return 1

    output_dir = ssg.config.output_dir
    formatter.success({"output_dir": str(output_dir)}, f"Built site into {output_dir}")
    return 0
