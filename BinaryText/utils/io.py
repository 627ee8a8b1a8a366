"""
File I/O utilities for BinaryText.
"""

import os
import sys
from typing import Optional


def read_bytes(filepath: Optional[str]) -> bytes:
    """
    Reads raw bytes from a file, or from stdin when filepath is None or "-".
    
    Args:
        filepath: Path to read
    
    Returns:
        File contents
    """
    if filepath is None or filepath == "-":
        return sys.stdin.buffer.read()

    if not os.path.isfile(filepath):
        raise FileNotFoundError(f"Input file not found: {filepath}")

    with open(filepath, "rb") as f:
        return f.read()

def read_text(filepath: Optional[str], encoding: str = "utf-8") -> str:
    """Reads text from a file, or from stdin when filepath is None or "-"."""
    return read_bytes(filepath).decode(encoding)

def write_bytes(filepath: Optional[str], data: bytes) -> None:
    """
    Writes raw bytes to a file, or to stdout when filepath is None or "-".
    
    Args:
        filepath: Destination path
        data: Bytes to write
    """
    if filepath is None or filepath == "-":
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return

    ensure_dir(os.path.dirname(filepath) or ".")
    with open(filepath, "wb") as f:
        f.write(data)

def write_text(filepath: Optional[str], text: str, encoding: str = "utf-8") -> None:
    write_bytes(filepath, text.encode(encoding))

def ensure_dir(path: str) -> str:
    """Ensures that a directory exists. Create it if it doesn't."""
    os.makedirs(path, exist_ok=True)
    return path
