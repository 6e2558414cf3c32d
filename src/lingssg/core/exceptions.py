from __future__ import annotations

from typing import Any, Dict, Mapping


class LingSsgError(Exception):
    """Base exception for lingssg."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class ConfigError(LingSsgError, ValueError):
    """Raised when the merged configuration is invalid."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        LingSsgError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class UnknownPackError(LingSsgError, LookupError):
    """Raised when an active pack name has no installer."""

    def __init__(self, pack_name: str) -> None:
        LingSsgError.__init__(self, f"Unknown pack {pack_name}", context={"pack": pack_name})
        LookupError.__init__(self, f"Unknown pack {pack_name}")
        self.pack_name = pack_name


__all__ = [
    "LingSsgError",
    "ConfigError",
    "UnknownPackError",
]
