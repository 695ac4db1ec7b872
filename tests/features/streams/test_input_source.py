"""Tests for the input source selector."""

from __future__ import annotations

import io
import os
from pathlib import Path

import pytest

from ttyguard.features.streams import InputSource, StreamKind


def test_open_file_reads_contents(tmp_path: Path) -> None:
    """A named file is opened for binary reading and owned by the source."""

    input_file = tmp_path / "input.bin"
    _ = input_file.write_bytes(b"\x00\x01binary\xff")

    with InputSource.open_file(input_file) as source:
        assert source.kind is StreamKind.FILE
        assert source.path == input_file
        assert source.read(3) == b"\x00\x01b"
        assert source.read() == b"inary\xff"
        assert source.read() == b""

    assert source.closed


def test_open_file_accepts_string_paths(tmp_path: Path) -> None:
    input_file = tmp_path / "input.txt"
    _ = input_file.write_text("hello", encoding="utf-8")

    with InputSource.open_file(str(input_file)) as source:
        assert source.read() == b"hello"


def test_open_missing_file_raises_not_found(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        _ = InputSource.open_file(tmp_path / "missing.txt")


def test_open_directory_raises_os_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        _ = InputSource.open_file(tmp_path)


@pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="permission bits are not enforced for root or on this platform",
)
def test_open_unreadable_file_raises_permission_error(tmp_path: Path) -> None:
    input_file = tmp_path / "secret.txt"
    _ = input_file.write_text("secret", encoding="utf-8")
    input_file.chmod(0o000)
    try:
        with pytest.raises(PermissionError):
            _ = InputSource.open_file(input_file)
    finally:
        input_file.chmod(0o600)


def test_standard_input_is_read_but_never_closed() -> None:
    """Closing a stdin-backed source leaves the process stream usable."""

    stdin = io.BytesIO(b"from stdin")

    with InputSource.wrap_standard_input(stdin) as source:
        assert source.kind is StreamKind.STANDARD
        assert source.path is None
        assert source.read() == b"from stdin"

    assert source.closed
    assert not stdin.closed


def test_closing_file_source_releases_handle(tmp_path: Path) -> None:
    input_file = tmp_path / "input.txt"
    _ = input_file.write_bytes(b"data")
    source = InputSource.open_file(input_file)

    source.close()
    source.close()

    assert source.closed
    with pytest.raises(ValueError):
        _ = source.read()


def test_handle_is_closed_when_the_block_raises(tmp_path: Path) -> None:
    input_file = tmp_path / "input.txt"
    _ = input_file.write_bytes(b"data")

    with pytest.raises(RuntimeError):
        with InputSource.open_file(input_file) as source:
            raise RuntimeError("boom")

    assert source.closed
