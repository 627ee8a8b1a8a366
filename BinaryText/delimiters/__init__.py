"""
Delimiter resolution for BinaryText.

Translates logical delimiter names into join literals and removal patterns.
"""

from BinaryText.delimiters.table import (
    Delimiter,
    DelimiterTable,
    DEFAULT_TABLE,
    char_rep,
    regex_rep,
)

__all__ = [
    "Delimiter",
    "DelimiterTable",
    "DEFAULT_TABLE",
    "char_rep",
    "regex_rep",
]
