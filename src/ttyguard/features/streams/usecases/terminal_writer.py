"""
Summary: Terminal-safe writer capping and validating output bound for an interactive terminal.
Why: Keep binary dumps and unbounded output away from humans without failing the calling tool.
"""

from __future__ import annotations

from typing import final

from ttyguard.platform.logging import logger

from ..domain.errors import UnprintableContentError
from ..domain.models import DEFAULT_TRUNCATION_LIMIT, TRUNCATED_TTY_MESSAGE
from .ports import WritableStream
from .stream_events import StreamEvent


@final
class TerminalSafeWriter:
    """Wrap a raw output stream and enforce the terminal output policy.

    When ``is_terminal`` is False every write is passed through untouched. When it
    is True, writes must be valid UTF-8, at most ``limit`` bytes ever reach the
    stream, and the truncation trailer is written once, immediately before the
    first dropped byte. Dropped bytes are still reported as written so callers
    never see a short write caused by truncation.
    """

    __slots__ = ("_stream", "_is_terminal", "_limit", "_bytes_written", "_truncated")

    def __init__(
        self,
        stream: WritableStream,
        *,
        is_terminal: bool,
        limit: int = DEFAULT_TRUNCATION_LIMIT,
    ) -> None:
        if limit <= 0:
            raise ValueError(f"Truncation limit must be positive, got {limit}")
        self._stream = stream
        self._is_terminal = is_terminal
        self._limit = limit
        self._bytes_written = 0
        self._truncated = False

    @property
    def is_terminal(self) -> bool:
        return self._is_terminal

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def bytes_written(self) -> int:
        """Payload bytes delivered to the terminal so far (always 0 for non-terminals)."""

        return self._bytes_written

    @property
    def truncated(self) -> bool:
        return self._truncated

    def write(self, data: bytes | bytearray | memoryview) -> int:
        """Write ``data`` according to the terminal policy.

        Returns:
            int: The underlying stream's result for non-terminals, otherwise
            ``len(data)`` including any bytes dropped by truncation.

        Raises:
            UnprintableContentError: If the destination is a terminal and
                ``data`` is not valid UTF-8. Nothing is written or counted.
        """
        if not self._is_terminal:
            return self._stream.write(data)

        payload = bytes(data)
        self._ensure_printable(payload)

        if self._truncated:
            return len(payload)

        to_write = min(self._limit - self._bytes_written, len(payload))
        if to_write:
            _ = self._stream.write(payload[:to_write])
            self._bytes_written += to_write

        if self._bytes_written == self._limit and len(payload) > to_write:
            self._truncate(discarded=len(payload) - to_write)

        return len(payload)

    def flush(self) -> None:
        self._stream.flush()

    def _ensure_printable(self, payload: bytes) -> None:
        try:
            _ = payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            logger.debug(
                "Refusing to write %d unprintable bytes to the terminal",
                len(payload),
                extra={"stream_event": StreamEvent.WRITE_REJECTED, "size": len(payload)},
            )
            raise UnprintableContentError() from exc

    def _truncate(self, *, discarded: int) -> None:
        _ = self._stream.write(TRUNCATED_TTY_MESSAGE)
        self._truncated = True
        logger.debug(
            "Terminal output truncated at %d bytes",
            self._limit,
            extra={
                "stream_event": StreamEvent.OUTPUT_TRUNCATED,
                "limit": self._limit,
                "discarded": discarded,
            },
        )


__all__ = ["TerminalSafeWriter"]
