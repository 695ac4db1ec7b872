"""Tests for the stream application service."""

from __future__ import annotations

import io
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from ttyguard import (
    TRUNCATED_TTY_MESSAGE,
    InteractiveRefusedError,
    StreamKind,
    UnprintableContentError,
    copy_stream,
    open_input,
    open_output,
)

SERVICE = "ttyguard.application.services.stream_service"


@pytest.fixture
def process_terminal(mocker: MockerFixture) -> MagicMock:
    """Replace the default process terminal adapter."""

    adapter_cls = mocker.patch(f"{SERVICE}.ProcessTerminalAdapter")
    return adapter_cls.return_value


def test_open_input_defaults_to_process_stdin(mocker: MockerFixture) -> None:
    stdin = io.BytesIO(b"piped")
    _ = mocker.patch(f"{SERVICE}.standard_input", return_value=stdin)

    with open_input() as source:
        assert source.kind is StreamKind.STANDARD
        assert source.read() == b"piped"


def test_open_input_with_path_ignores_stdin(tmp_path: Path, mocker: MockerFixture) -> None:
    input_file = tmp_path / "in.txt"
    _ = input_file.write_bytes(b"file")
    stdin_accessor = mocker.patch(f"{SERVICE}.standard_input")

    with open_input(input_file) as source:
        assert source.read() == b"file"

    stdin_accessor.assert_not_called()


def test_open_output_with_path_never_queries_terminal(
    tmp_path: Path, process_terminal: MagicMock
) -> None:
    """A named output file bypasses terminal detection and deny_interactive."""

    with open_output(tmp_path / "out.txt", deny_interactive=True) as sink:
        assert sink.kind is StreamKind.FILE

    process_terminal.is_stdout_tty.assert_not_called()


def test_open_output_defaults_to_process_terminal(
    mocker: MockerFixture, process_terminal: MagicMock
) -> None:
    process_terminal.is_stdout_tty.return_value = True
    stdout = io.BytesIO()
    _ = mocker.patch(f"{SERVICE}.standard_output", return_value=stdout)

    with open_output(limit=3) as sink:
        _ = sink.write(b"abcdef")

    assert stdout.getvalue() == b"abc" + TRUNCATED_TTY_MESSAGE
    process_terminal.is_stdout_tty.assert_called_once_with()


def test_open_output_refuses_denied_terminal(tty_terminal, stdout_buffer) -> None:
    with pytest.raises(InteractiveRefusedError):
        _ = open_output(None, True, terminal=tty_terminal, stdout=stdout_buffer)


def test_copy_stream_to_pipe_is_byte_identical(
    tmp_path: Path, pipe_terminal, stdout_buffer
) -> None:
    payload = bytes(range(256)) * 40
    input_file = tmp_path / "in.bin"
    _ = input_file.write_bytes(payload)

    with open_input(input_file) as source, open_output(
        terminal=pipe_terminal, stdout=stdout_buffer
    ) as sink:
        result = copy_stream(source, sink, chunk_size=333)

    assert stdout_buffer.getvalue() == payload
    assert result.bytes_read == len(payload)
    assert result.bytes_reported == len(payload)
    assert result.truncated is False
    assert stdout_buffer.flushes >= 1


def test_copy_stream_to_terminal_truncates(tty_terminal, stdout_buffer) -> None:
    payload = b"0123456789abcdef\n" * 300

    with open_input(stdin=io.BytesIO(payload)) as source, open_output(
        terminal=tty_terminal, stdout=stdout_buffer
    ) as sink:
        result = copy_stream(source, sink, chunk_size=100)

    assert stdout_buffer.getvalue() == payload[:1600] + TRUNCATED_TTY_MESSAGE
    assert result.bytes_read == len(payload)
    assert result.bytes_reported == len(payload)
    assert result.truncated is True
    assert result.duration_ms >= 0


def test_copy_stream_to_file_keeps_everything(tmp_path: Path) -> None:
    payload = b"x" * 10_000
    output_file = tmp_path / "out.txt"

    with open_input(stdin=io.BytesIO(payload)) as source, open_output(output_file) as sink:
        result = copy_stream(source, sink, chunk_size=4096)

    assert output_file.read_bytes() == payload
    assert result.truncated is False


def test_copy_stream_rejects_binary_to_terminal(tty_terminal, stdout_buffer) -> None:
    with open_input(stdin=io.BytesIO(b"\x89PNG\r\n\x1a\n\x00\x00")) as source, open_output(
        terminal=tty_terminal, stdout=stdout_buffer
    ) as sink:
        with pytest.raises(UnprintableContentError):
            _ = copy_stream(source, sink, chunk_size=64)

    assert stdout_buffer.getvalue() == b""


@pytest.mark.parametrize("chunk_size", [0, -5])
def test_copy_stream_requires_positive_chunk_size(
    chunk_size: int, pipe_terminal, stdout_buffer
) -> None:
    with open_input(stdin=io.BytesIO(b"data")) as source, open_output(
        terminal=pipe_terminal, stdout=stdout_buffer
    ) as sink:
        with pytest.raises(ValueError):
            _ = copy_stream(source, sink, chunk_size=chunk_size)


@pytest.mark.parametrize("chunk_size", [1, 2, 6, 7])
def test_copy_stream_keeps_characters_split_across_reads(
    chunk_size: int, tty_terminal, stdout_buffer
) -> None:
    payload = ("a" * 5 + "é" * 10 + "€𝄞").encode("utf-8")

    with open_input(stdin=io.BytesIO(payload)) as source, open_output(
        terminal=tty_terminal, stdout=stdout_buffer
    ) as sink:
        result = copy_stream(source, sink, chunk_size=chunk_size)

    assert stdout_buffer.getvalue() == payload
    assert result.bytes_read == len(payload)
    assert result.bytes_reported == len(payload)


def test_copy_stream_split_character_after_truncation(tty_terminal, stdout_buffer) -> None:
    payload = ("a" * 1601 + "é").encode("utf-8")

    with open_input(stdin=io.BytesIO(payload)) as source, open_output(
        terminal=tty_terminal, stdout=stdout_buffer
    ) as sink:
        result = copy_stream(source, sink, chunk_size=1602)

    assert stdout_buffer.getvalue() == b"a" * 1600 + TRUNCATED_TTY_MESSAGE
    assert result.bytes_reported == len(payload)
    assert result.truncated is True


def test_copy_stream_rejects_character_cut_off_at_end(tty_terminal, stdout_buffer) -> None:
    payload = b"ok" + "é".encode("utf-8")[:1]

    with open_input(stdin=io.BytesIO(payload)) as source, open_output(
        terminal=tty_terminal, stdout=stdout_buffer
    ) as sink:
        with pytest.raises(UnprintableContentError):
            _ = copy_stream(source, sink, chunk_size=2)

    assert stdout_buffer.getvalue() == b"ok"


def test_copy_stream_to_pipe_does_not_hold_back_bytes(pipe_terminal, stdout_buffer) -> None:
    payload = b"ab\xc3"

    with open_input(stdin=io.BytesIO(payload)) as source, open_output(
        terminal=pipe_terminal, stdout=stdout_buffer
    ) as sink:
        result = copy_stream(source, sink, chunk_size=3)

    assert stdout_buffer.getvalue() == payload
    assert result.bytes_reported == len(payload)
