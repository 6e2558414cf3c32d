"""
lingssg config show command.

SUMMARY: Show current configuration

Displays the merged configuration from bundled defaults, project overrides,
and environment variables.
"""

from __future__ import annotations

import argparse
from typing import Any

import yaml

from lingssg.cli import OutputFormatter, add_json_flag, add_repo_root_flag, get_repo_root
from lingssg.core.config import ConfigManager
from lingssg.core.exceptions import LingSsgError

SUMMARY = "Show current configuration"

_MISSING = object()


def _nest_key(key: str, value: Any) -> Any:
    """Nest a dot-notation key into a YAML/JSON-friendly mapping."""
    out = value
    for part in reversed([p for p in key.split(".") if p]):
        out = {part: out}
    return out


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "key",
        nargs="?",
        help="Specific configuration key to show (e.g., 'site.output_dir')",
    )
    add_json_flag(parser)
    add_repo_root_flag(parser)


def main(args: argparse.Namespace) -> int:
    """Show configuration - delegates to ConfigManager."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        config_manager = ConfigManager(get_repo_root(args))
        data = config_manager.get_all()
    except LingSsgError as e:
        formatter.error(e, error_code="config_error")
        return 1

    if args.key:
        value = config_manager.get(args.key, _MISSING)
        if value is _MISSING:
            formatter.error(KeyError(args.key), f"Key not found: {args.key}", error_code="missing_key")
            return 1
        data = _nest_key(args.key, value)

    if formatter.json_mode:
        formatter.json_output(data)
    else:
        formatter.text(
            yaml.safe_dump(data, default_flow_style=False, sort_keys=True, allow_unicode=True).rstrip()
        )
    return 0
