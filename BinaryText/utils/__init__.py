from BinaryText.utils.device import get_device, set_device, DeviceContext
from BinaryText.utils.logging import get_logger, BinaryTextLogger
from BinaryText.utils.io import read_bytes, read_text, write_bytes, write_text, ensure_dir

__all__ = [
    "get_device",
    "set_device",
    "DeviceContext",
    "get_logger",
    "BinaryTextLogger",
    "read_bytes",
    "read_text",
    "write_bytes",
    "write_text",
    "ensure_dir",
]
