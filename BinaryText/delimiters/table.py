"""
Delimiter lookup table for BinaryText.

Maps a logical delimiter name (e.g. "Space", "Colon") to the literal text
inserted between encoded groups and to the pattern stripped before decoding.
"""

import re
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Pattern, Union

from BinaryText.errors import InvalidParameter, UnknownDelimiter


WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class Delimiter:
    """
    A named delimiter.

    Attributes:
        name: Logical name used by callers
        literal: Text joined between encoded groups
        pattern: Compiled regex matching every occurrence to remove when decoding
    """

    name: str
    literal: str
    pattern: Pattern

    def strip(self, data: str) -> str:
        """Removes every occurrence of this delimiter from data."""
        return self.pattern.sub("", data)


class DelimiterTable:
    """
    Injectable mapping of delimiter names to Delimiter entries.

    Usage:
        table = DelimiterTable.default()
        table.register("Pipe", "|")

        to_binary([1, 2], "Pipe", delimiters=table)
    """

    def __init__(self, delimiters: Optional[List[Delimiter]] = None):
        self._entries: Dict[str, Delimiter] = {}
        for delimiter in delimiters or []:
            self._entries[delimiter.name] = delimiter

    @classmethod
    def default(cls) -> "DelimiterTable":
        """Creates a table holding the built-in delimiters."""
        table = cls()
        for name, literal, pattern in _BUILTIN:
            table.register(name, literal, pattern)
        return table

    def register(
        self,
        name: str,
        literal: str,
        pattern: Union[str, Pattern, None] = None,
    ) -> Delimiter:
        """
        Adds or replaces a delimiter.

        Args:
            name: Logical name
            literal: Join text, may be empty
            pattern: Removal regex; defaults to the escaped literal, or to
                whitespace when the literal is empty

        Returns:
            The registered Delimiter
        """
        if not isinstance(name, str) or not name:
            raise InvalidParameter("Delimiter name must be a non-empty string")
        if not isinstance(literal, str):
            raise InvalidParameter("Delimiter literal must be a string")

        if pattern is None:
            compiled = re.compile(re.escape(literal)) if literal else WHITESPACE
        elif isinstance(pattern, str):
            compiled = re.compile(pattern)
        else:
            compiled = pattern

        delimiter = Delimiter(name=name, literal=literal, pattern=compiled)
        self._entries[name] = delimiter
        return delimiter

    def unregister(self, name: str) -> None:
        if name not in self._entries:
            raise UnknownDelimiter(name)
        del self._entries[name]

    def get(self, name: str) -> Delimiter:
        try:
            return self._entries[name]
        except (KeyError, TypeError):
            raise UnknownDelimiter(name) from None

    def names(self) -> List[str]:
        return list(self._entries)

    def copy(self) -> "DelimiterTable":
        return DelimiterTable(list(self._entries.values()))

    def __contains__(self, name) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[Delimiter]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


_BUILTIN = [
    ("Space", " ", WHITESPACE),
    ("Percent", "%", None),
    ("Comma", ",", None),
    ("Semi-colon", ";", None),
    ("Colon", ":", None),
    ("Tab", "\t", None),
    ("Line feed", "\n", None),
    ("CRLF", "\r\n", None),
    ("Forward slash", "/", None),
    ("Backslash", "\\", None),
    ("0x", "0x", None),
    ("\\x", "\\x", None),
    ("Nothing (separate chars)", "", WHITESPACE),
    ("None", "", WHITESPACE),
]

DEFAULT_TABLE = DelimiterTable.default()


def char_rep(name: str, table: Optional[DelimiterTable] = None) -> str:
    """Resolves a delimiter name to its literal join text."""
    return _resolve(table).get(name).literal


def regex_rep(name: str, table: Optional[DelimiterTable] = None) -> Pattern:
    """Resolves a delimiter name to the pattern removed before decoding."""
    return _resolve(table).get(name).pattern


def _resolve(table: Optional[DelimiterTable]) -> DelimiterTable:
    return DEFAULT_TABLE if table is None else table
