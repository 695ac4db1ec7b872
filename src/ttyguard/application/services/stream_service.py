"""Application service wiring the stream use cases to the process streams.

Callers that do not care about injection use ``open_input`` and ``open_output``;
tests and embedding tools pass their own terminal and standard streams.
"""

from __future__ import annotations

import os
import time
from dataclasses import dataclass
from typing import final

from ttyguard.features.streams import (
    DEFAULT_TRUNCATION_LIMIT,
    InputSource,
    OutputSink,
    ReadableStream,
    StreamEvent,
    TerminalPort,
    WritableStream,
)
from ttyguard.features.streams.adapters import (
    ProcessTerminalAdapter,
    standard_input,
    standard_output,
)
from ttyguard.platform.logging import logger


def open_input(
    path: str | os.PathLike[str] | None = None,
    *,
    stdin: ReadableStream | None = None,
) -> InputSource:
    """Open ``path`` for reading, or standard input when ``path`` is ``None``."""

    if path is not None:
        return InputSource.open_file(path)
    return InputSource.wrap_standard_input(stdin if stdin is not None else standard_input())


def open_output(
    path: str | os.PathLike[str] | None = None,
    deny_interactive: bool = False,
    *,
    terminal: TerminalPort | None = None,
    stdout: WritableStream | None = None,
    limit: int = DEFAULT_TRUNCATION_LIMIT,
) -> OutputSink:
    """Create ``path`` exclusively, or wrap standard output when ``path`` is ``None``.

    ``deny_interactive`` only matters for standard output: when it is set and
    stdout is a terminal, ``InteractiveRefusedError`` is raised immediately.
    """

    if path is not None:
        return OutputSink.create_file(path)
    return OutputSink.wrap_standard_output(
        deny_interactive,
        terminal=terminal if terminal is not None else ProcessTerminalAdapter(),
        stdout=stdout if stdout is not None else standard_output(),
        limit=limit,
    )


@final
@dataclass(slots=True, frozen=True)
class CopyResult:
    """Summary of a completed copy."""

    bytes_read: int
    bytes_reported: int
    truncated: bool
    duration_ms: float


def _incomplete_utf8_tail(data: bytes) -> int:
    """Length of a multi-byte UTF-8 sequence cut short at the end of ``data``."""

    for back in range(1, min(4, len(data)) + 1):
        byte = data[-back]
        if byte & 0xC0 == 0x80:
            continue
        if byte >= 0xF0:
            needed = 4
        elif byte >= 0xE0:
            needed = 3
        elif byte >= 0xC0:
            needed = 2
        else:
            needed = 1
        return back if needed > back else 0
    return 0


def copy_stream(source: InputSource, sink: OutputSink, *, chunk_size: int) -> CopyResult:
    """Copy everything from ``source`` to ``sink`` in ``chunk_size`` reads, then flush.

    On an interactive terminal a character split across two reads is held back
    and written whole with the next read. A sequence still incomplete at end of
    input is written as is, so the terminal writer rejects it.
    """

    if chunk_size <= 0:
        raise ValueError(f"Chunk size must be positive, got {chunk_size}")

    writer = sink.terminal_writer
    whole_characters = writer is not None and writer.is_terminal

    start = time.perf_counter()
    bytes_read = 0
    bytes_reported = 0
    pending = b""
    for chunk in iter(lambda: source.read(chunk_size), b""):
        bytes_read += len(chunk)
        if whole_characters:
            chunk = pending + chunk
            held = _incomplete_utf8_tail(chunk)
            chunk, pending = chunk[: len(chunk) - held], chunk[len(chunk) - held :]
            if not chunk:
                continue
        bytes_reported += sink.write(chunk)
    if pending:
        bytes_reported += sink.write(pending)
    sink.flush()

    result = CopyResult(
        bytes_read=bytes_read,
        bytes_reported=bytes_reported,
        truncated=writer is not None and writer.truncated,
        duration_ms=(time.perf_counter() - start) * 1000,
    )
    logger.debug(
        "Copied %d bytes",
        bytes_read,
        extra={
            "stream_event": StreamEvent.COPY_COMPLETE,
            "bytes_read": result.bytes_read,
            "duration_ms": result.duration_ms,
            "truncated": result.truncated,
        },
    )
    return result


__all__ = ["CopyResult", "copy_stream", "open_input", "open_output"]
