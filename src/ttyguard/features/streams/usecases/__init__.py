"""Use cases for the streams feature."""

from __future__ import annotations

from .input_source import InputSource
from .output_sink import OutputSink
from .ports import ReadableStream, TerminalPort, WritableStream
from .stream_events import StreamEvent
from .terminal_writer import TerminalSafeWriter

__all__ = [
    "InputSource",
    "OutputSink",
    "ReadableStream",
    "StreamEvent",
    "TerminalPort",
    "TerminalSafeWriter",
    "WritableStream",
]
