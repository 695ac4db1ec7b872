"""Rich console handler with styling for structured stream events.

Where: platform/logging/handlers.py
What: Render ``stream_event`` log records with icons, colours and compact paths.
Why: Keep stream diagnostics readable on stderr while stdout carries data.
"""

from __future__ import annotations

import logging
import sys
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class StreamEventRichHandler(RichHandler):
    """Custom Rich handler that renders stream events and highlights paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "stream.input.open": ("📥", "cyan"),
        "stream.output.open": ("📤", "cyan"),
        "stream.output.refused": ("⛔", "red"),
        "stream.output.truncated": ("✂️", "yellow"),
        "stream.write.rejected": ("❌", "red"),
        "stream.copy.complete": ("✅", "green"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path with coloured separators, keeping only the trailing segments."""

        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if anchor and not truncated:
            display_string = anchor.rstrip("\\/") + separator
        if truncated:
            display_string += "…" + separator
        display_string += separator.join(body_parts)

        return self._style_path_string(display_string or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        """Apply Rich styling to the rendered path string."""

        text = Text()
        for char in path_string:
            if char == separator or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _describe_stream(self, record: logging.LogRecord) -> Text:
        """Describe the file or standard stream a record refers to."""

        path = getattr(record, "path", None)
        if path:
            return self._format_path(str(path))
        stream_name = getattr(record, "stream_name", None) or "stdio"
        return Text(f"<{stream_name}>", style=Style(color="white", italic=True))

    def _render_stream_event(self, record: logging.LogRecord) -> Text | None:
        """Render structured stream events with dedicated styling."""

        event = getattr(record, "stream_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        details: list[str] = []

        if event == "stream.input.open":
            _ = body.append("Reading ")
            _ = body.append_text(self._describe_stream(record))
        elif event == "stream.output.open":
            _ = body.append("Writing ")
            _ = body.append_text(self._describe_stream(record))
            if getattr(record, "interactive", False):
                details.append("tty")
                limit = getattr(record, "limit", None)
                if isinstance(limit, int):
                    details.append(f"limit={limit}")
        elif event == "stream.output.refused":
            _ = body.append("Refused terminal output")
        elif event == "stream.output.truncated":
            _ = body.append("Terminal output truncated")
            limit = getattr(record, "limit", None)
            discarded = getattr(record, "discarded", None)
            if isinstance(limit, int):
                details.append(f"limit={limit}")
            if isinstance(discarded, int):
                details.append(f"dropped={discarded}")
        elif event == "stream.write.rejected":
            _ = body.append("Rejected unprintable write")
            size = getattr(record, "size", None)
            if isinstance(size, int):
                details.append(f"size={size}")
        elif event == "stream.copy.complete":
            _ = body.append("Copy complete")
            bytes_read = getattr(record, "bytes_read", None)
            duration_ms = getattr(record, "duration_ms", None)
            if isinstance(bytes_read, int):
                details.append(f"bytes={bytes_read}")
            if isinstance(duration_ms, (int, float)):
                details.append(f"{duration_ms:.2f} ms")
            if getattr(record, "truncated", False):
                details.append("truncated")
        else:
            _ = body.append(record.getMessage())

        if details:
            _ = body.append(" [" + ", ".join(details) + "]")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for stream events."""

        event_text = self._render_stream_event(record)
        if event_text is not None:
            return event_text

        return super().render_message(record, message)


__all__ = ["StreamEventRichHandler"]
