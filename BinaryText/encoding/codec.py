"""
Single-item encoding and decoding functions between byte values and delimited binary strings.
"""

import math
import numbers
import re
from typing import List, Optional, Union

import numpy as np
import torch

from BinaryText.delimiters.table import DelimiterTable, char_rep, regex_rep
from BinaryText.encoding.constants import (
    DEFAULT_BYTE_LENGTH,
    DEFAULT_DELIMITER,
    DEFAULT_PADDING,
)
from BinaryText.errors import InvalidInput, InvalidParameter
from BinaryText.utils.logging import get_logger


ByteData = Union[bytes, bytearray, memoryview, List[int], tuple, range, np.ndarray, torch.Tensor, int]

BYTE_LENGTH_ERROR = "Byte length must be a positive integer"
PADDING_ERROR = "Padding must be a non-negative integer"

# leading whitespace, optional sign, then the longest run of binary digits
_LEADING_BINARY = re.compile(r"\s*([+-]?)([01]+)")


def _is_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_integral(value) -> bool:
    if isinstance(value, numbers.Integral):
        return True
    return float(value).is_integer()


def _check_width(value, minimum: int, message: str) -> int:
    if not _is_number(value):
        raise InvalidParameter(message)
    if not _is_integral(value) or value < minimum:
        raise InvalidParameter(message)
    return int(value)


def _to_byte_value(value, index: Optional[int] = None) -> int:
    where = "Value" if index is None else f"Element {index}"

    if not _is_number(value):
        raise InvalidInput(f"{where} is not numeric: {value!r}")
    if not _is_integral(value):
        raise InvalidInput(f"{where} is not an integer: {value!r}")

    value = int(value)
    if value < 0:
        raise InvalidInput(f"{where} is negative: {value}")
    return value


def _flatten(data):
    """
    Normalizes sequence-like input to a flat list.

    Returns None when data is neither sequence-like nor numeric, and the
    bare value when data is a scalar (including 0-d arrays and tensors).
    """
    if isinstance(data, torch.Tensor):
        data = data.detach().cpu().numpy()
    elif isinstance(data, memoryview):
        data = np.asarray(data)

    if isinstance(data, np.ndarray):
        if data.ndim == 0:
            return data.item()
        return data.reshape(-1).tolist()

    if isinstance(data, (bytes, bytearray)):
        return list(data)
    if isinstance(data, (list, tuple, range)):
        return list(data)

    if _is_number(data):
        return data
    return None


def format_group(value: int, padding: int) -> str:
    """Renders a non-negative integer as binary digits left-padded with '0'."""
    return format(value, "b").zfill(padding)


def parse_group(chunk: str) -> Union[int, float]:
    """
    Parses a binary group the way a lenient base-2 integer parse would.

    Leading whitespace is skipped, a single sign is honoured, and parsing
    stops at the first character that is not '0' or '1'.

    Returns:
        The parsed integer, or float('nan') when the chunk has no leading binary digits
    """
    match = _LEADING_BINARY.match(chunk)
    if match is None:
        return math.nan

    value = int(match.group(2), 2)
    return -value if match.group(1) == "-" else value


def to_binary(
    data: ByteData,
    delim: str = DEFAULT_DELIMITER,
    padding: int = DEFAULT_PADDING,
    delimiters: Optional[DelimiterTable] = None,
) -> str:
    """
    Converts byte values into a delimited binary string.

    Each value is written as binary digits left-padded with '0' to at
    least `padding` characters. Wider values are emitted in full.

    Args:
        data: Sequence of byte values, or a single number
        delim: Delimiter name joined between groups
        padding: Minimum digits per group
        delimiters: Delimiter table (default: built-in table)

    Returns:
        Binary string; empty when data is empty or not convertible

    Example:
        >>> to_binary([10, 20, 30])
        '00001010 00010100 00011110'
        >>> to_binary([10, 20, 30], "Colon")
        '00001010:00010100:00011110'
    """
    padding = _check_width(padding, 0, PADDING_ERROR)
    literal = char_rep(delim, delimiters)
    logger = get_logger()

    values = _flatten(data)
    if values is None:
        return ""

    if not isinstance(values, list):
        logger.conversion("to_binary", 1, "", padding, scalar=True)
        return format_group(_to_byte_value(values), padding)

    groups = [format_group(_to_byte_value(v, i), padding) for i, v in enumerate(values)]
    logger.conversion("to_binary", len(groups), literal, padding)
    return literal.join(groups)


def from_binary(
    data: Union[str, bytes],
    delim: str = DEFAULT_DELIMITER,
    byte_len: int = DEFAULT_BYTE_LENGTH,
    delimiters: Optional[DelimiterTable] = None,
) -> List[Union[int, float]]:
    """
    Converts a binary string back into byte values.

    The delimiter is stripped first, then the remaining characters are cut
    into consecutive groups of `byte_len`. A trailing short group is parsed
    from the digits it has. Groups without leading binary digits come back
    as float('nan') and are kept in the output.

    Args:
        data: Binary string
        delim: Delimiter name whose occurrences are removed
        byte_len: Digits per group
        delimiters: Delimiter table (default: built-in table)

    Returns:
        List of parsed values

    Raises:
        InvalidParameter: If byte_len is not a positive integer

    Example:
        >>> from_binary("00001010 00010100 00011110")
        [10, 20, 30]
        >>> from_binary("00001010:00010100:00011110", "Colon")
        [10, 20, 30]
    """
    byte_len = _check_width(byte_len, 1, BYTE_LENGTH_ERROR)

    if isinstance(data, (bytes, bytearray)):
        try:
            data = bytes(data).decode("ascii")
        except UnicodeDecodeError as e:
            raise InvalidInput(f"Binary input is not ASCII: {e}") from e
    elif not isinstance(data, str):
        raise InvalidInput(f"Binary input must be a string, got {type(data).__name__}")

    data = regex_rep(delim, delimiters).sub("", data)

    output = [parse_group(data[i:i + byte_len]) for i in range(0, len(data), byte_len)]

    logger = get_logger()
    malformed = sum(1 for v in output if isinstance(v, float))
    if malformed:
        logger.warning(f"from_binary: {malformed} group(s) contain no binary digits and decode to NaN")
    logger.conversion("from_binary", len(output), delim, byte_len)

    return output
