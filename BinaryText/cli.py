"""
Command line entry point for BinaryText.

    binarytext encode photo.png -o photo.bin.txt -d Colon
    binarytext decode photo.bin.txt -o photo.png -d Colon
    echo "Hi" | binarytext encode --text
"""

import argparse
import logging
import sys
from typing import List, Optional

from BinaryText.delimiters.table import DEFAULT_TABLE
from BinaryText.encoding.constants import DEFAULT_BYTE_LENGTH, DEFAULT_DELIMITER, DEFAULT_PADDING
from BinaryText.errors import OperationError
from BinaryText.interface.config import ConverterConfig
from BinaryText.interface.converter import BinaryConverter
from BinaryText.utils.io import read_bytes, write_text
from BinaryText.utils.logging import get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="binarytext",
        description="Convert data to delimited binary strings and back.",
    )
    parser.add_argument("--list-delimiters", action="store_true",
                        help="Print the known delimiter names and exit")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log each conversion at debug level")

    sub = parser.add_subparsers(dest="mode")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("input", nargs="?", default="-",
                        help="Input file (default: stdin)")
    common.add_argument("-o", "--output", default="-",
                        help="Output file (default: stdout)")
    common.add_argument("-d", "--delimiter", default=DEFAULT_DELIMITER,
                        help=f"Delimiter name (default: {DEFAULT_DELIMITER})")
    common.add_argument("--text", action="store_true",
                        help="Treat the plain side as text instead of raw bytes")
    common.add_argument("--encoding", default="utf-8",
                        help="Text encoding used with --text (default: utf-8)")

    enc = sub.add_parser("encode", parents=[common], help="Bytes to binary string")
    enc.add_argument("-p", "--padding", type=int, default=DEFAULT_PADDING,
                     help=f"Minimum digits per group (default: {DEFAULT_PADDING})")

    dec = sub.add_parser("decode", parents=[common], help="Binary string to bytes")
    dec.add_argument("-b", "--byte-length", type=int, default=DEFAULT_BYTE_LENGTH,
                     help=f"Digits per group (default: {DEFAULT_BYTE_LENGTH})")

    return parser


def run(args: argparse.Namespace) -> int:
    config = ConverterConfig(
        delimiter=args.delimiter,
        padding=getattr(args, "padding", DEFAULT_PADDING),
        byte_length=getattr(args, "byte_length", DEFAULT_BYTE_LENGTH),
        text_encoding=args.encoding,
    )
    converter = BinaryConverter(config)

    if args.mode == "encode":
        binary = converter.encode_file(args.input, text=args.text)
        write_text(args.output, binary + "\n" if args.output == "-" else binary)
    elif args.text:
        binary = read_bytes(args.input).rstrip(b"\r\n")
        write_text(args.output, converter.decode_text(binary), args.encoding)
    else:
        converter.decode_file(args.input, args.output)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_delimiters:
        for delimiter in DEFAULT_TABLE:
            print(f"{delimiter.name:<26}{delimiter.literal!r}")
        return 0

    if args.mode is None:
        parser.print_help(sys.stderr)
        return 2

    # stdout carries the converted data, so log records go to stderr
    level = logging.DEBUG if args.verbose else None
    with get_logger().redirect(sys.stderr, level):
        try:
            return run(args)
        except OperationError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
        except (OSError, UnicodeError) as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
