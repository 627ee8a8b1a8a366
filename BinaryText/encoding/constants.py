DEFAULT_DELIMITER = "Space"
DEFAULT_PADDING = 8
DEFAULT_BYTE_LENGTH = 8

BYTE_MIN = 0
BYTE_MAX = 255
