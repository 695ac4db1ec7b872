"""Tests for the process-backed terminal and stdio adapters."""

from __future__ import annotations

import io
import sys

import pytest
from pytest_mock import MockerFixture

from ttyguard.features.streams.adapters import (
    ProcessTerminalAdapter,
    standard_input,
    standard_output,
)


class _StdoutWithFd:
    def fileno(self) -> int:
        return 1


def test_terminal_adapter_checks_stdout_descriptor(
    monkeypatch: pytest.MonkeyPatch, mocker: MockerFixture
) -> None:
    monkeypatch.setattr(sys, "stdout", _StdoutWithFd())
    isatty = mocker.patch(
        "ttyguard.features.streams.adapters.terminal_adapter.os.isatty",
        return_value=True,
    )

    assert ProcessTerminalAdapter().is_stdout_tty() is True
    isatty.assert_called_once_with(1)


def test_terminal_adapter_treats_fileless_stdout_as_non_terminal(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """A replaced stdout without a descriptor is never a terminal."""

    monkeypatch.setattr(sys, "stdout", io.StringIO())

    assert ProcessTerminalAdapter().is_stdout_tty() is False


def test_stdio_accessors_return_binary_buffers(monkeypatch: pytest.MonkeyPatch) -> None:
    fake_stdin = io.TextIOWrapper(io.BytesIO(b"raw \xff input"))
    fake_stdout = io.TextIOWrapper(io.BytesIO())
    monkeypatch.setattr(sys, "stdin", fake_stdin)
    monkeypatch.setattr(sys, "stdout", fake_stdout)

    assert standard_input().read() == b"raw \xff input"
    assert standard_output() is fake_stdout.buffer
