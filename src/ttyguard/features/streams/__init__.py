# Where: ttyguard.features.streams.__init__
# What: Expose stream selectors, the terminal-safe writer, and their errors.
# Why: Provide a cohesive import surface for application and UI layers.

from .domain import (
    DEFAULT_TRUNCATION_LIMIT,
    TRUNCATED_TTY_MESSAGE,
    InteractiveRefusedError,
    StreamKind,
    TtyGuardError,
    UnprintableContentError,
)
from .usecases import (
    InputSource,
    OutputSink,
    ReadableStream,
    StreamEvent,
    TerminalPort,
    TerminalSafeWriter,
    WritableStream,
)

__all__ = [
    "DEFAULT_TRUNCATION_LIMIT",
    "TRUNCATED_TTY_MESSAGE",
    "InputSource",
    "InteractiveRefusedError",
    "OutputSink",
    "ReadableStream",
    "StreamEvent",
    "StreamKind",
    "TerminalPort",
    "TerminalSafeWriter",
    "TtyGuardError",
    "UnprintableContentError",
    "WritableStream",
]
