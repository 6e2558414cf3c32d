"""Dictionary merging for layered configuration.

Later layers win. Nested mappings merge key by key; lists are replaced,
unless the overriding list starts with ``"+"``, in which case its remaining
items are appended:

    >>> deep_merge({"packs": {"active": ["a"]}}, {"packs": {"active": ["+", "b"]}})
    {'packs': {'active': ['a', 'b']}}
"""
from __future__ import annotations

from typing import Any, Dict, List

APPEND_MARKER = "+"


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``."""
    result: Dict[str, Any] = dict(base)
    for key, value in (override or {}).items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        elif isinstance(current, list) and isinstance(value, list):
            result[key] = merge_lists(current, value)
        else:
            result[key] = value
    return result


def merge_lists(base: List[Any], override: List[Any]) -> List[Any]:
    if override and override[0] == APPEND_MARKER:
        return [*base, *override[1:]]
    return list(override)


__all__ = ["deep_merge", "merge_lists", "APPEND_MARKER"]
