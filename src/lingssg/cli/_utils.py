"""Shared CLI utilities."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from lingssg.core.config import ConfigManager, SiteConfig
from lingssg.core.ssg import LinSsg
from lingssg.packs import install_packs

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
CLI_HANDLER_NAME = "lingssg-cli"


def get_repo_root(args: argparse.Namespace) -> Path:
    """Project root from ``--repo-root``, or the current directory."""
    if getattr(args, "repo_root", None):
        return Path(args.repo_root).resolve()
    return Path.cwd().resolve()


def read_input(args: argparse.Namespace) -> str:
    """Input text from the positional argument, ``--file`` or stdin, in that order."""
    if getattr(args, "text", None) is not None:
        return args.text
    if getattr(args, "file", None):
        return Path(args.file).read_text(encoding="utf-8")
    return sys.stdin.read()


def create_site(repo_root: Path) -> LinSsg:
    """Build a :class:`LinSsg` for ``repo_root`` with its active packs installed."""
    site_config = SiteConfig.from_config(ConfigManager(repo_root))
    ssg = LinSsg(site_config)
    install_packs(ssg, site_config.packs)
    return ssg


def configure_cli_logging(verbose: bool = False) -> None:
    """Send ``lingssg`` log records to stderr (DEBUG when verbose, WARNING otherwise)."""
    root = logging.getLogger("lingssg")
    # Replace the handler installed by a previous call.
    for handler in list(root.handlers):
        if handler.get_name() == CLI_HANDLER_NAME:
            root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(CLI_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


__all__ = ["get_repo_root", "read_input", "create_site", "configure_cli_logging"]
