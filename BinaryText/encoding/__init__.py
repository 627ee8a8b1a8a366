"""
Binary string encoding and decoding for BinaryText.

Handles conversion between byte values and delimited binary-digit strings.
"""

from BinaryText.encoding.codec import to_binary, from_binary, format_group, parse_group
from BinaryText.encoding.batch import (
    to_binary_batch,
    from_binary_batch,
    to_bit_tensor,
    from_bit_tensor,
)
from BinaryText.encoding.constants import (
    DEFAULT_DELIMITER,
    DEFAULT_PADDING,
    DEFAULT_BYTE_LENGTH,
)

__all__ = [
    "to_binary",
    "from_binary",
    "format_group",
    "parse_group",
    "to_binary_batch",
    "from_binary_batch",
    "to_bit_tensor",
    "from_bit_tensor",
    "DEFAULT_DELIMITER",
    "DEFAULT_PADDING",
    "DEFAULT_BYTE_LENGTH",
]
