"""
Batch and tensor helpers built on the single-item codec.
"""

import torch
import numpy as np
from typing import List, Optional, Sequence, Union

from BinaryText.delimiters.table import DelimiterTable
from BinaryText.encoding.codec import ByteData, _check_width, _flatten, _to_byte_value, from_binary, to_binary
from BinaryText.encoding.constants import DEFAULT_BYTE_LENGTH, DEFAULT_DELIMITER, DEFAULT_PADDING
from BinaryText.errors import InvalidInput
from BinaryText.utils.device import get_device


def to_binary_batch(
    items: Sequence[ByteData],
    delim: str = DEFAULT_DELIMITER,
    padding: int = DEFAULT_PADDING,
    delimiters: Optional[DelimiterTable] = None,
) -> List[str]:
    """
    Converts a batch of byte sequences to binary strings.
    
    Args:
        items: Byte sequences (or single numbers)
        delim: Delimiter name
        padding: Minimum digits per group
        delimiters: Delimiter table
    
    Returns:
        One binary string per item
    """
    return [to_binary(item, delim, padding, delimiters) for item in items]

def from_binary_batch(
    strings: Sequence[str],
    delim: str = DEFAULT_DELIMITER,
    byte_len: int = DEFAULT_BYTE_LENGTH,
    delimiters: Optional[DelimiterTable] = None,
) -> List[List[Union[int, float]]]:
    """Converts a batch of binary strings back to value lists."""
    return [from_binary(s, delim, byte_len, delimiters) for s in strings]

def to_bit_tensor(
    data: ByteData,
    padding: int = DEFAULT_PADDING,
    device: Optional[torch.device] = None,
) -> torch.Tensor:
    """
    Converts byte values to a tensor of bits.
    
    Bits are MSB-first, stored as 0.0 / 1.0.
    
    Args:
        data: Byte values, or a single number
        padding: Bits per row; every value must fit
        device: Target device for tensor (default: auto-detect)
    
    Returns:
        Tensor of shape (n, padding)
    """
    padding = _check_width(padding, 1, "Bit width must be a positive integer")
    if device is None:
        device = get_device()

    values = _flatten(data)
    if values is None:
        values = []
    elif not isinstance(values, list):
        values = [values]

    values = [_to_byte_value(v, i) for i, v in enumerate(values)]
    for i, v in enumerate(values):
        if v.bit_length() > padding:
            raise InvalidInput(f"Element {i} needs {v.bit_length()} bits, more than {padding}")

    # object dtype keeps wide values exact before shifting
    column = np.array(values, dtype=object).reshape(-1, 1)
    shifts = np.array(range(padding - 1, -1, -1), dtype=object)
    bits = ((column >> shifts) & 1).astype(np.float32)

    return torch.tensor(bits, dtype=torch.float32, device=device).reshape(-1, padding)

def from_bit_tensor(
    bits: Union[torch.Tensor, np.ndarray, List[List[float]]],
) -> List[int]:
    """
    Converts rows of bits back to integer values.
    
    Args:
        bits: Tensor, array, or nested lists of shape (n, width)
    
    Returns:
        One integer per row
    """
    if isinstance(bits, torch.Tensor):
        bits = bits.detach().cpu().numpy()
    bits = np.asarray(bits, dtype=np.float64)

    if bits.ndim == 1:
        if bits.size == 0:
            return []
        bits = bits.reshape(1, -1)
    if bits.ndim != 2:
        raise InvalidInput(f"Expected a 2-D bit array, got {bits.ndim} dimensions")

    values = []
    for row in bits > 0.5:
        val = 0
        for bit in row:
            val = (val << 1) | int(bit)
        values.append(val)
    return values
