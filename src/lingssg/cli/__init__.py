"""
lingssg CLI package.

Commands are auto-discovered from subfolders (transcode/, site/, config/).

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _utils: Shared CLI utilities
"""
from ._args import add_input_args, add_json_flag, add_repo_root_flag
from ._output import OutputFormatter
from ._utils import configure_cli_logging, create_site, get_repo_root, read_input

__all__ = [
    "OutputFormatter",
    "add_json_flag",
    "add_repo_root_flag",
    "add_input_args",
    "get_repo_root",
    "read_input",
    "create_site",
    "configure_cli_logging",
]
