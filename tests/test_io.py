"""Tests for file I/O and logging utilities."""

from __future__ import annotations

import logging

import pytest

from BinaryText.utils.io import ensure_dir, read_bytes, read_text, write_bytes, write_text
from BinaryText.utils.logging import BinaryTextLogger, get_logger


def test_bytes_roundtrip(tmp_path):
    path = tmp_path / "nested" / "data.bin"
    write_bytes(str(path), b"\x00\x01\xff")
    assert read_bytes(str(path)) == b"\x00\x01\xff"


def test_text_roundtrip(tmp_path):
    path = tmp_path / "data.txt"
    write_text(str(path), "héllo")
    assert read_text(str(path)) == "héllo"
    assert path.read_bytes() == "héllo".encode("utf-8")


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_bytes(str(tmp_path / "missing.bin"))


def test_ensure_dir(tmp_path):
    path = tmp_path / "a" / "b"
    assert ensure_dir(str(path)) == str(path)
    assert path.is_dir()
    ensure_dir(str(path))


def test_get_logger_is_shared():
    logger = get_logger()
    assert isinstance(logger, BinaryTextLogger)
    assert get_logger() is logger
    assert logger.logger.name == "BinaryText"


def test_conversion_skipped_below_debug(caplog):
    logger = get_logger()
    with caplog.at_level(logging.INFO, logger="BinaryText"):
        logger.conversion("to_binary", 3, " ", 8)
    assert caplog.text == ""

    with caplog.at_level(logging.DEBUG, logger="BinaryText"):
        logger.conversion("from_binary", 3, "Space", 8, note="x")
    assert "from_binary | groups: 3 | delim: 'Space' | width: 8 | note: x" in caplog.text
