"""
BinaryText main converter interface.
"""

from typing import List, Optional, Union

from BinaryText.delimiters.table import DEFAULT_TABLE, DelimiterTable
from BinaryText.encoding.codec import ByteData, from_binary, to_binary
from BinaryText.encoding.constants import BYTE_MAX, BYTE_MIN
from BinaryText.errors import InvalidInput, MalformedGroup
from BinaryText.interface.config import ConverterConfig
from BinaryText.utils.io import read_bytes, read_text, write_bytes
from BinaryText.utils.logging import get_logger


class BinaryConverter:
    """
    High-level interface for binary string conversion.

    Binds a delimiter, group widths and a text codec so callers do not
    repeat them on every call.

    Usage:
        converter = BinaryConverter()

        converter.encode([10, 20, 30])       # "00001010 00010100 00011110"
        converter.decode("00001010 00010100") # [10, 20]

        # Text
        binary = converter.encode_text("Hi")
        text = converter.decode_text(binary)

        # Custom settings
        converter = BinaryConverter(ConverterConfig(delimiter="Colon", padding=4))
    """

    def __init__(
        self,
        config: Optional[ConverterConfig] = None,
        delimiters: Optional[DelimiterTable] = None,
    ):
        self.config = (config or ConverterConfig()).validate()
        self.delimiters = DEFAULT_TABLE if delimiters is None else delimiters
        # fail early on a delimiter name the table does not know
        self.delimiters.get(self.config.delimiter)

    @classmethod
    def from_dict(
        cls,
        d: dict,
        delimiters: Optional[DelimiterTable] = None,
    ) -> "BinaryConverter":
        """
        Creates a converter from a plain settings dictionary.

        Args:
            d: Keys matching ConverterConfig fields; others are ignored
            delimiters: Delimiter table

        Returns:
            BinaryConverter instance
        """
        return cls(ConverterConfig.from_dict(d), delimiters)

    def encode(self, data: ByteData) -> str:
        """
        Encodes byte values to a binary string.

        Args:
            data: Byte values, or a single number

        Returns:
            Delimited binary string
        """
        return to_binary(data, self.config.delimiter, self.config.padding, self.delimiters)

    def decode(self, data: Union[str, bytes]) -> List[Union[int, float]]:
        """
        Decodes a binary string to values.

        Malformed groups come back as NaN, as with from_binary.
        """
        return from_binary(data, self.config.delimiter, self.config.byte_length, self.delimiters)

    def decode_to_bytes(self, data: Union[str, bytes]) -> bytes:
        """
        Decodes a binary string to bytes.

        Raises:
            MalformedGroup: If a group is NaN or outside 0-255
        """
        values = self.decode(data)
        for i, value in enumerate(values):
            if isinstance(value, float) or not BYTE_MIN <= value <= BYTE_MAX:
                raise MalformedGroup(i, value)
        return bytes(values)

    def encode_text(self, text: str) -> str:
        """Encodes a string's bytes under the configured text encoding."""
        if not isinstance(text, str):
            raise InvalidInput(f"Text must be a string, got {type(text).__name__}")
        return self.encode(text.encode(self.config.text_encoding, self.config.errors))

    def decode_text(self, data: Union[str, bytes]) -> str:
        """Decodes a binary string to text under the configured text encoding."""
        raw = self.decode_to_bytes(data)
        try:
            return raw.decode(self.config.text_encoding, self.config.errors)
        except UnicodeDecodeError as e:
            raise InvalidInput(f"Decoded bytes are not valid {self.config.text_encoding}: {e}") from e

    def encode_file(self, filepath: Optional[str], text: bool = False) -> str:
        """
        Encodes a file's contents.

        Args:
            filepath: Input path, or None / "-" for stdin
            text: Read the file as text and re-encode under the configured encoding

        Returns:
            Binary string
        """
        if text:
            return self.encode_text(read_text(filepath, self.config.text_encoding))
        return self.encode(read_bytes(filepath))

    def decode_file(
        self,
        filepath: Optional[str],
        out_path: Optional[str] = None,
    ) -> bytes:
        """
        Decodes a file holding a binary string and writes the raw bytes.

        Trailing line terminators in the file are ignored.

        Args:
            filepath: Input path, or None / "-" for stdin
            out_path: Output path, or None / "-" for stdout

        Returns:
            Decoded bytes
        """
        raw = self.decode_to_bytes(read_bytes(filepath).rstrip(b"\r\n"))
        write_bytes(out_path, raw)
        get_logger().debug(f"decode_file: wrote {len(raw)} bytes")
        return raw
