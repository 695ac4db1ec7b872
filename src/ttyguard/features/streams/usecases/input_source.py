"""
Summary: Input source selecting between a named file and standard input.
Why: Give CLI commands one readable byte stream regardless of where input comes from.
"""

from __future__ import annotations

import os
from pathlib import Path
from types import TracebackType
from typing import final

from ttyguard.platform.logging import logger

from ..domain.models import StreamKind
from .ports import ReadableStream
from .stream_events import StreamEvent


@final
class InputSource:
    """Readable byte stream backed by either an opened file or standard input.

    Only file-backed sources own their handle; closing a standard-input source
    leaves the process stream open.
    """

    __slots__ = ("_stream", "_kind", "_path", "_closed")

    def __init__(
        self,
        stream: ReadableStream,
        *,
        kind: StreamKind,
        path: Path | None = None,
    ) -> None:
        self._stream = stream
        self._kind = kind
        self._path = path
        self._closed = False

    @classmethod
    def open_file(cls, path: str | os.PathLike[str]) -> InputSource:
        """Open ``path`` for binary reading.

        Raises:
            FileNotFoundError: If ``path`` does not exist.
            PermissionError: If ``path`` cannot be read.
            OSError: For any other failure opening ``path``.
        """
        file_path = Path(path)
        handle = open(file_path, "rb")  # noqa: SIM115
        logger.debug(
            "Reading from %s",
            file_path,
            extra={"stream_event": StreamEvent.INPUT_OPEN, "path": file_path},
        )
        return cls(handle, kind=StreamKind.FILE, path=file_path)

    @classmethod
    def wrap_standard_input(cls, stdin: ReadableStream) -> InputSource:
        """Wrap the process standard input without taking ownership of it."""

        logger.debug(
            "Reading from standard input",
            extra={"stream_event": StreamEvent.INPUT_OPEN, "stream_name": "stdin"},
        )
        return cls(stdin, kind=StreamKind.STANDARD)

    @property
    def kind(self) -> StreamKind:
        return self._kind

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def closed(self) -> bool:
        return self._closed

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes, or everything that remains when ``size`` is negative."""

        if self._closed:
            raise ValueError("I/O operation on closed input source")
        return self._stream.read(size)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._kind is StreamKind.FILE:
            self._stream.close()

    def __enter__(self) -> InputSource:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ["InputSource"]
