from BinaryText.interface.config import ConverterConfig
from BinaryText.interface.converter import BinaryConverter

__all__ = [
    "ConverterConfig",
    "BinaryConverter",
]
