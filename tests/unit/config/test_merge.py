"""Tests for deep_merge."""
from __future__ import annotations

from lingssg.core.utils.merge import deep_merge


class TestDeepMerge:
    def test_nested_mappings_merge(self) -> None:
        base = {"site": {"a": 1, "b": 2}}
        assert deep_merge(base, {"site": {"b": 3}}) == {"site": {"a": 1, "b": 3}}
        assert base == {"site": {"a": 1, "b": 2}}

    def test_scalar_replaces_mapping(self) -> None:
        assert deep_merge({"a": {"b": 1}}, {"a": 2}) == {"a": 2}

    def test_lists_replace_or_append(self) -> None:
        assert deep_merge({"l": [1]}, {"l": [2]}) == {"l": [2]}
        assert deep_merge({"l": [1]}, {"l": ["+", 2]}) == {"l": [1, 2]}

    def test_none_override(self) -> None:
        assert deep_merge({"a": 1}, None) == {"a": 1}  # type: ignore[arg-type]
