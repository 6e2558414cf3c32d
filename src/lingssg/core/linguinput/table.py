"""Process-wide bidirectional code/symbol table.

The table is built once from :data:`raw.TABLE` and shared read-only by every
encoder and decoder. Construction is attempted exactly once per process: a
failure is cached and raised again to every later caller of :meth:`Table.load`.
"""
from __future__ import annotations

import logging
import threading
from typing import Dict, Iterable, Optional, Tuple, Union

from lingssg.core.exceptions import LingSsgError

from . import raw

logger = logging.getLogger(__name__)


class TableInitError(LingSsgError):
    """Raised when the source table is not a bijection."""


class DuplicatedCode(TableInitError):
    """A code appears twice in the source table."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Duplicated character code {code} in table", context={"code": code})
        self.code = code


class DuplicatedChar(TableInitError):
    """A symbol appears twice in the source table."""

    def __init__(self, char: str) -> None:
        super().__init__(f"Duplicated character {char} in table", context={"char": char})
        self.char = char


class Table:
    """Immutable code <-> symbol mapping."""

    __slots__ = ("_max_code_len", "_code_to_char", "_char_to_code")

    _instance: Optional[Union["Table", TableInitError]] = None
    _lock = threading.Lock()

    def __init__(
        self,
        max_code_len: int,
        code_to_char: Dict[str, str],
        char_to_code: Dict[str, str],
    ) -> None:
        self._max_code_len = max_code_len
        self._code_to_char = code_to_char
        self._char_to_code = char_to_code

    @property
    def max_code_len(self) -> int:
        """Length in UTF-8 bytes of the longest code."""
        return self._max_code_len

    def code_to_char(self, code: str) -> Optional[str]:
        return self._code_to_char.get(code)

    def char_to_code(self, char: str) -> Optional[str]:
        return self._char_to_code.get(char)

    def __len__(self) -> int:
        return len(self._code_to_char)

    def items(self) -> Iterable[Tuple[str, str]]:
        """Iterate ``(code, symbol)`` pairs in source order."""
        return self._code_to_char.items()

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> "Table":
        """Build and validate an unshared table.

        Raises:
            DuplicatedCode: if a code repeats
            DuplicatedChar: if a symbol repeats
        """
        max_code_len = 0
        code_to_char: Dict[str, str] = {}
        char_to_code: Dict[str, str] = {}
        for code, char in pairs:
            max_code_len = max(max_code_len, len(code.encode("utf-8")))
            if code in code_to_char:
                raise DuplicatedCode(code)
            code_to_char[code] = char
            if char in char_to_code:
                raise DuplicatedChar(char)
            char_to_code[char] = code
        return cls(max_code_len, code_to_char, char_to_code)

    @classmethod
    def load(cls) -> "Table":
        """Return the shared table, building it on first use.

        Raises:
            TableInitError: the cached construction failure, on every call
        """
        instance = cls._instance
        if instance is None:
            with cls._lock:
                instance = cls._instance
                if instance is None:
                    try:
                        instance = cls.from_pairs(raw.TABLE)
                        logger.debug(
                            "Loaded code table: %d entries, max code length %d",
                            len(instance),
                            instance.max_code_len,
                        )
                    except TableInitError as err:
                        logger.error("Code table is invalid: %s", err)
                        instance = err
                    cls._instance = instance
        if isinstance(instance, TableInitError):
            raise instance
        return instance


__all__ = ["Table", "TableInitError", "DuplicatedCode", "DuplicatedChar"]
