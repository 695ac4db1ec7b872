"""
Summary: Error types raised by the stream selectors and the terminal-safe writer.
Why: Let callers handle terminal policy failures alongside ordinary OSError cases.
"""

from __future__ import annotations


class TtyGuardError(OSError):
    """Base class for terminal policy failures."""


class InteractiveRefusedError(TtyGuardError):
    """Output was requested to an interactive terminal while the caller forbids it."""

    def __init__(self, message: str = "not printing to stdout") -> None:
        super().__init__(message)


class UnprintableContentError(TtyGuardError):
    """A write bound for an interactive terminal was not valid UTF-8 text."""

    def __init__(self, message: str = "not printing unprintable message to stdout") -> None:
        super().__init__(message)


__all__ = ["InteractiveRefusedError", "TtyGuardError", "UnprintableContentError"]
