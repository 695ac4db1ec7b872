"""Shared fixtures for the ttyguard test suite."""

from __future__ import annotations

import io
from collections.abc import Iterator
from pathlib import Path

import pytest

from ttyguard.config import Config


class FakeTerminal:
    """In-memory terminal reporting a fixed stdout TTY state and counting queries."""

    def __init__(self, *, is_stdout_tty: bool) -> None:
        self._is_stdout_tty = is_stdout_tty
        self.queries = 0

    def is_stdout_tty(self) -> bool:
        self.queries += 1
        return self._is_stdout_tty


class RecordingStream(io.BytesIO):
    """BytesIO that counts flushes."""

    def __init__(self) -> None:
        super().__init__()
        self.flushes = 0

    def flush(self) -> None:
        self.flushes += 1
        super().flush()


@pytest.fixture
def tty_terminal() -> FakeTerminal:
    """Terminal whose stdout is interactive."""

    return FakeTerminal(is_stdout_tty=True)


@pytest.fixture
def pipe_terminal() -> FakeTerminal:
    """Terminal whose stdout is a pipe or redirect."""

    return FakeTerminal(is_stdout_tty=False)


@pytest.fixture
def stdout_buffer() -> RecordingStream:
    """In-memory stand-in for the binary standard output."""

    return RecordingStream()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point configuration at a temporary file and reset the cached instance."""

    config_file = tmp_path / "config" / "config.toml"
    monkeypatch.setenv("TTYGUARD_CONFIG_FILE", str(config_file))
    Config.reset()
    try:
        yield config_file
    finally:
        Config.reset()
