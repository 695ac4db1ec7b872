"""File-or-stdio stream adapters for CLI tools with terminal-safe output.

Typical use::

    from ttyguard import open_input, open_output

    with open_input(args.input) as source, open_output(args.output) as sink:
        sink.write(transform(source.read()))
"""

from __future__ import annotations

from ttyguard.application.services import CopyResult, copy_stream, open_input, open_output
from ttyguard.features.streams import (
    DEFAULT_TRUNCATION_LIMIT,
    TRUNCATED_TTY_MESSAGE,
    InputSource,
    InteractiveRefusedError,
    OutputSink,
    StreamKind,
    TerminalPort,
    TerminalSafeWriter,
    TtyGuardError,
    UnprintableContentError,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_TRUNCATION_LIMIT",
    "TRUNCATED_TTY_MESSAGE",
    "CopyResult",
    "InputSource",
    "InteractiveRefusedError",
    "OutputSink",
    "StreamKind",
    "TerminalPort",
    "TerminalSafeWriter",
    "TtyGuardError",
    "UnprintableContentError",
    "copy_stream",
    "open_input",
    "open_output",
]
