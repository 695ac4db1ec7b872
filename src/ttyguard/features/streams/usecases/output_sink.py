"""
Summary: Output sink selecting between an exclusively created file and a terminal-safe stdout.
Why: Never overwrite existing files and never flood an interactive terminal.
"""

from __future__ import annotations

import os
from pathlib import Path
from types import TracebackType
from typing import BinaryIO, final

from ttyguard.platform.logging import logger

from ..domain.errors import InteractiveRefusedError
from ..domain.models import DEFAULT_TRUNCATION_LIMIT, StreamKind
from .ports import TerminalPort, WritableStream
from .stream_events import StreamEvent
from .terminal_writer import TerminalSafeWriter


@final
class OutputSink:
    """Writable byte stream backed by either a new file or a ``TerminalSafeWriter``.

    File-backed sinks own and close their handle. Standard-output sinks are only
    flushed on close; the process stream stays open.
    """

    __slots__ = ("_stream", "_kind", "_path", "_closed")

    def __init__(
        self,
        stream: BinaryIO | TerminalSafeWriter,
        *,
        kind: StreamKind,
        path: Path | None = None,
    ) -> None:
        self._stream = stream
        self._kind = kind
        self._path = path
        self._closed = False

    @classmethod
    def create_file(cls, path: str | os.PathLike[str]) -> OutputSink:
        """Create ``path`` exclusively for binary writing.

        Raises:
            FileExistsError: If ``path`` already exists; it is never truncated.
            OSError: For any other failure creating ``path``.
        """
        file_path = Path(path)
        handle = open(file_path, "xb")  # noqa: SIM115
        logger.debug(
            "Writing to %s",
            file_path,
            extra={"stream_event": StreamEvent.OUTPUT_OPEN, "path": file_path},
        )
        return cls(handle, kind=StreamKind.FILE, path=file_path)

    @classmethod
    def wrap_standard_output(
        cls,
        deny_interactive: bool,
        *,
        terminal: TerminalPort,
        stdout: WritableStream,
        limit: int = DEFAULT_TRUNCATION_LIMIT,
    ) -> OutputSink:
        """Wrap ``stdout`` in a ``TerminalSafeWriter``.

        The terminal is queried exactly once, here.

        Raises:
            InteractiveRefusedError: If ``stdout`` is a terminal and
                ``deny_interactive`` is set. Nothing has been written.
        """
        is_terminal = terminal.is_stdout_tty()
        if is_terminal and deny_interactive:
            logger.debug(
                "Refusing to write to a terminal",
                extra={"stream_event": StreamEvent.OUTPUT_REFUSED},
            )
            raise InteractiveRefusedError()

        writer = TerminalSafeWriter(stdout, is_terminal=is_terminal, limit=limit)
        logger.debug(
            "Writing to standard output",
            extra={
                "stream_event": StreamEvent.OUTPUT_OPEN,
                "stream_name": "stdout",
                "interactive": is_terminal,
                "limit": limit,
            },
        )
        return cls(writer, kind=StreamKind.STANDARD)

    @property
    def kind(self) -> StreamKind:
        return self._kind

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def terminal_writer(self) -> TerminalSafeWriter | None:
        """The wrapped writer for standard-output sinks, ``None`` for files."""

        if isinstance(self._stream, TerminalSafeWriter):
            return self._stream
        return None

    def write(self, data: bytes | bytearray | memoryview) -> int:
        if self._closed:
            raise ValueError("I/O operation on closed output sink")
        return self._stream.write(data)

    def flush(self) -> None:
        self._stream.flush()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if isinstance(self._stream, TerminalSafeWriter):
            self._stream.flush()
        else:
            self._stream.close()

    def __enter__(self) -> OutputSink:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ["OutputSink"]
