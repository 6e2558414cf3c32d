"""Tests for the shared code/symbol table."""
from __future__ import annotations

import threading

import pytest

from lingssg.core.linguinput import DuplicatedChar, DuplicatedCode, Table, TableInitError, raw


class TestFromPairs:
    def test_builds_both_directions(self) -> None:
        table = Table.from_pairs([("e", "ɛ"), ("ea", "ə")])
        assert table.code_to_char("e") == "ɛ"
        assert table.char_to_code("ə") == "ea"
        assert table.code_to_char("x") is None
        assert len(table) == 2

    def test_max_code_len_counts_utf8_bytes(self) -> None:
        """Code length is measured in bytes, not characters."""
        table = Table.from_pairs([("a", "1"), ("é", "2")])
        assert table.max_code_len == 2

    def test_duplicated_code(self) -> None:
        with pytest.raises(DuplicatedCode) as excinfo:
            Table.from_pairs([("e", "ɛ"), ("e", "ə")])
        assert excinfo.value.code == "e"
        assert "Duplicated character code e" in str(excinfo.value)

    def test_duplicated_char(self) -> None:
        with pytest.raises(DuplicatedChar) as excinfo:
            Table.from_pairs([("e", "ɛ"), ("E", "ɛ")])
        assert excinfo.value.char == "ɛ"

    def test_items_keep_source_order(self) -> None:
        table = Table.from_pairs([("b", "β"), ("a", "ɐ")])
        assert list(table.items()) == [("b", "β"), ("a", "ɐ")]


class TestCanonicalTable:
    def test_canonical_table_is_a_bijection(self) -> None:
        table = Table.load()
        assert len(table) == len(raw.TABLE)
        for code, char in raw.TABLE:
            assert table.code_to_char(code) == char
            assert table.char_to_code(char) == code

    def test_max_code_len(self) -> None:
        assert Table.load().max_code_len == max(len(code.encode("utf-8")) for code, _ in raw.TABLE)

    def test_known_entries(self) -> None:
        table = Table.load()
        assert table.code_to_char("U") == "ʊ"
        assert table.code_to_char("4") == "˦"
        assert table.code_to_char("//") == "⫽"
        assert table.code_to_char("#^") == "\u0361"


class TestLoad:
    def test_load_returns_shared_instance(self) -> None:
        assert Table.load() is Table.load()

    def test_concurrent_first_use_builds_once(self) -> None:
        results = []

        def worker() -> None:
            results.append(Table.load())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 8
        assert all(table is results[0] for table in results)

    def test_failure_is_cached(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A broken table fails every later load, even once the source is fixed."""
        monkeypatch.setattr(raw, "TABLE", [("a", "x"), ("a", "y")])
        with pytest.raises(DuplicatedCode) as first:
            Table.load()

        monkeypatch.setattr(raw, "TABLE", [("a", "x")])
        with pytest.raises(TableInitError) as second:
            Table.load()
        assert second.value is first.value
