"""
Converter configuration for BinaryText.
"""

import codecs
from dataclasses import dataclass

from BinaryText.encoding.codec import BYTE_LENGTH_ERROR, PADDING_ERROR, _check_width
from BinaryText.encoding.constants import DEFAULT_BYTE_LENGTH, DEFAULT_DELIMITER, DEFAULT_PADDING
from BinaryText.errors import InvalidParameter


@dataclass
class ConverterConfig:
    """
    Configuration parameters for a BinaryConverter.

    Captures the delimiter, group widths and text codec settings.
    """

    delimiter: str = DEFAULT_DELIMITER
    padding: int = DEFAULT_PADDING
    byte_length: int = DEFAULT_BYTE_LENGTH

    text_encoding: str = "utf-8"
    errors: str = "strict"

    def validate(self) -> "ConverterConfig":
        """Checks field values, raising InvalidParameter on the first bad one."""
        if not isinstance(self.delimiter, str):
            raise InvalidParameter("delimiter must be a delimiter name")
        self.padding = _check_width(self.padding, 0, PADDING_ERROR)
        self.byte_length = _check_width(self.byte_length, 1, BYTE_LENGTH_ERROR)
        try:
            codecs.lookup(self.text_encoding)
        except LookupError:
            raise InvalidParameter(f"Unknown text encoding: {self.text_encoding!r}") from None
        try:
            codecs.lookup_error(self.errors)
        except LookupError:
            raise InvalidParameter(f"Unknown error handler: {self.errors!r}") from None
        return self

    def to_dict(self) -> dict:
        """Gets a dictionary representation of the config."""
        return {
            k: v for k, v in self.__dict__.items()
            if not k.startswith("_")
        }

    @classmethod
    def from_dict(cls, d: dict) -> "ConverterConfig":
        """Creates a ConverterConfig from a dictionary."""
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})
