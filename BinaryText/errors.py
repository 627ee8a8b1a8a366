"""
Exception hierarchy for BinaryText.
"""


class OperationError(Exception):
    """Base class for every error raised by BinaryText."""


class InvalidParameter(OperationError, ValueError):
    """A conversion parameter (byte length, padding, config value) is out of range."""


class UnknownDelimiter(InvalidParameter, KeyError):
    """The requested delimiter name is not in the delimiter table."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown delimiter: {name!r}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class InvalidInput(OperationError, TypeError):
    """The data handed to a conversion cannot be represented."""


class MalformedGroup(InvalidInput):
    """A decoded binary group is not a valid byte value."""

    def __init__(self, index: int, value):
        self.index = index
        self.value = value
        super().__init__(f"Group {index} does not decode to a byte: {value!r}")
