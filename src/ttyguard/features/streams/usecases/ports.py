"""
Summary: Protocols describing the byte streams and terminal capability the use cases need.
Why: Keep the selectors and writer testable against in-memory streams and a fake terminal.
"""

from __future__ import annotations

from typing import Protocol


class TerminalPort(Protocol):
    """Report whether standard output is attached to an interactive terminal."""

    def is_stdout_tty(self) -> bool:
        """Return True when standard output is a TTY."""

        ...


class ReadableStream(Protocol):
    """Sequential binary reader."""

    def read(self, size: int = -1, /) -> bytes:
        ...

    def close(self) -> None:
        ...


class WritableStream(Protocol):
    """Binary writer with an explicit flush."""

    def write(self, data: bytes, /) -> int:
        ...

    def flush(self) -> None:
        ...


__all__ = ["ReadableStream", "TerminalPort", "WritableStream"]
