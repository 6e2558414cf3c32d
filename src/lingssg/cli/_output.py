"""Unified CLI output formatting utilities.

Every command supports a text mode and a ``--json`` mode.
"""
from __future__ import annotations

import json
import sys
from typing import Any, Dict, Optional

from lingssg.core.exceptions import LingSsgError


class OutputFormatter:
    """Unified output formatter for CLI commands."""

    def __init__(self, json_mode: bool = False, indent: int = 2):
        self.json_mode = json_mode
        self.indent = indent

    def success(self, data: Dict[str, Any], message: str) -> None:
        """Print ``data`` as JSON in JSON mode, ``message`` otherwise."""
        if self.json_mode:
            output = {"status": "success", **data}
            print(json.dumps(output, indent=self.indent, default=str, ensure_ascii=False))
        else:
            print(message)

    def error(
        self,
        error: Exception,
        message: Optional[str] = None,
        *,
        error_code: str = "error",
    ) -> None:
        """Output an error, with its cause chain, to stderr.

        Args:
            error: The exception that occurred
            message: Optional human-readable message (defaults to str(error))
            error_code: Error code for JSON output
        """
        msg = message or str(error)
        causes = []
        source = error.__cause__
        while source is not None:
            causes.append(str(source))
            source = source.__cause__
        if self.json_mode:
            output: Dict[str, Any] = {"error": error_code, "message": msg}
            if isinstance(error, LingSsgError):
                output["details"] = error.to_json_error()
            if causes:
                output["causes"] = causes
            print(json.dumps(output, indent=self.indent, default=str, ensure_ascii=False), file=sys.stderr)
        else:
            print(f"Error: {msg}", file=sys.stderr)
            for cause in causes:
                print(f"  caused by: {cause}", file=sys.stderr)

    def json_output(self, data: Any) -> None:
        print(json.dumps(data, indent=self.indent, default=str, ensure_ascii=False))

    def text(self, message: str) -> None:
        print(message)


__all__ = ["OutputFormatter"]
