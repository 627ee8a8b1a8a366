"""
BinaryText - Binary String Conversion Library

Converts byte values to delimited binary-digit strings and back, with
configurable delimiters and group widths, text and file helpers, and
tensor helpers for bit-level consumers.
"""

from BinaryText.version import __version__

from BinaryText.encoding.codec import to_binary, from_binary
from BinaryText.delimiters.table import DelimiterTable, char_rep, regex_rep
from BinaryText.interface.converter import BinaryConverter
from BinaryText.interface.config import ConverterConfig
from BinaryText.errors import (
    OperationError,
    InvalidParameter,
    UnknownDelimiter,
    InvalidInput,
    MalformedGroup,
)

from BinaryText import encoding
from BinaryText import delimiters
from BinaryText import interface
from BinaryText import utils

__all__ = [
    "__version__",
    "to_binary",
    "from_binary",
    "DelimiterTable",
    "char_rep",
    "regex_rep",
    "BinaryConverter",
    "ConverterConfig",
    "OperationError",
    "InvalidParameter",
    "UnknownDelimiter",
    "InvalidInput",
    "MalformedGroup",
    "encoding",
    "delimiters",
    "interface",
    "utils",
]
