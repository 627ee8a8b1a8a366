"""Tests for the binarytext command line."""

from __future__ import annotations

import io
import types

import pytest

from BinaryText.cli import main


@pytest.fixture
def payload(tmp_path):
    path = tmp_path / "payload.bin"
    path.write_bytes(bytes([0, 10, 200, 255]))
    return path


def test_encode_decode_roundtrip(tmp_path, payload):
    encoded = tmp_path / "payload.txt"
    restored = tmp_path / "restored.bin"

    assert main(["encode", str(payload), "-o", str(encoded), "-d", "Colon"]) == 0
    assert encoded.read_text() == "00000000:00001010:11001000:11111111"

    assert main(["decode", str(encoded), "-o", str(restored), "-d", "Colon"]) == 0
    assert restored.read_bytes() == payload.read_bytes()


def test_padding_and_byte_length_flags(tmp_path, payload):
    encoded = tmp_path / "payload.txt"
    restored = tmp_path / "restored.bin"

    assert main(["encode", str(payload), "-o", str(encoded), "-p", "12", "-d", "None"]) == 0
    assert len(encoded.read_text()) == 48

    assert main(["decode", str(encoded), "-o", str(restored), "-b", "12", "-d", "None"]) == 0
    assert restored.read_bytes() == payload.read_bytes()


def test_text_mode(tmp_path):
    src = tmp_path / "note.txt"
    src.write_text("Hi", encoding="utf-8")
    encoded = tmp_path / "note.bin.txt"
    restored = tmp_path / "restored.txt"

    assert main(["encode", str(src), "-o", str(encoded), "--text"]) == 0
    assert encoded.read_text() == "01001000 01101001"

    assert main(["decode", str(encoded), "-o", str(restored), "--text"]) == 0
    assert restored.read_text(encoding="utf-8") == "Hi"


def test_unknown_delimiter_exits_with_error(payload, capsys):
    assert main(["encode", str(payload), "-d", "Pipe"]) == 2
    assert "Unknown delimiter" in capsys.readouterr().err


def test_invalid_byte_length_exits_with_error(tmp_path, capsys):
    src = tmp_path / "in.txt"
    src.write_text("00000001")
    assert main(["decode", str(src), "-b", "0"]) == 2
    assert "Byte length must be a positive integer" in capsys.readouterr().err


def test_malformed_group_exits_with_error(tmp_path, capsys):
    src = tmp_path / "in.txt"
    src.write_text("00000001 xxxxxxxx")
    assert main(["decode", str(src), "-o", str(tmp_path / "out.bin")]) == 2
    assert "Group 1" in capsys.readouterr().err


def test_missing_input_file(tmp_path, capsys):
    assert main(["encode", str(tmp_path / "missing.bin")]) == 1
    assert "not found" in capsys.readouterr().err


def test_list_delimiters(capsys):
    assert main(["--list-delimiters"]) == 0
    out = capsys.readouterr().out
    assert "Space" in out
    assert "Semi-colon" in out


def test_no_mode_prints_help(capsys):
    assert main([]) == 2
    assert "usage" in capsys.readouterr().err


@pytest.fixture
def pipe(monkeypatch):
    """Runs main() against in-memory stdin, stdout and stderr."""

    def run(argv, stdin: bytes = b""):
        stdout = types.SimpleNamespace(buffer=io.BytesIO())
        stderr = io.StringIO()
        monkeypatch.setattr("sys.stdin", types.SimpleNamespace(buffer=io.BytesIO(stdin)))
        monkeypatch.setattr("sys.stdout", stdout)
        monkeypatch.setattr("sys.stderr", stderr)
        code = main(argv)
        return code, stdout.buffer.getvalue(), stderr.getvalue()

    return run


@pytest.mark.parametrize("delim", ["Colon", "Comma", "Forward slash", "Space", "None"])
def test_stdin_stdout_roundtrip(pipe, delim):
    code, encoded, _ = pipe(["encode", "-d", delim], b"\x01\x02\xff")
    assert code == 0
    assert encoded.endswith(b"\n")

    code, decoded, err = pipe(["decode", "-d", delim], encoded)
    assert code == 0, err
    assert decoded == b"\x01\x02\xff"


def test_stdin_text_roundtrip(pipe):
    _, encoded, _ = pipe(["encode", "--text", "-d", "Colon"], "hé".encode("utf-8"))
    code, decoded, _ = pipe(["decode", "--text", "-d", "Colon"], encoded)
    assert code == 0
    assert decoded.decode("utf-8") == "hé"


def test_verbose_logs_stay_off_stdout(pipe):
    code, out, err = pipe(["-v", "encode"], b"\x01")
    assert code == 0
    assert out == b"00000001\n"
    assert "to_binary | groups: 1" in err

    code, out, err = pipe(["-v", "decode"], b"00000001\n")
    assert code == 0
    assert out == b"\x01"
    assert "from_binary" in err


def test_nan_warning_goes_to_stderr(pipe):
    code, out, err = pipe(["decode"], b"00000001 xxxxxxxx")
    assert code == 2
    assert out == b""
    assert "NaN" in err
    assert "Group 1" in err


def test_verbose_level_is_restored(pipe):
    from BinaryText.utils.logging import get_logger

    logger = get_logger()
    before = logger.logger.level
    pipe(["-v", "encode"], b"\x01")
    assert logger.logger.level == before
