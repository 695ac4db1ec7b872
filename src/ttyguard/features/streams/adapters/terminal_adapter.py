"""src/ttyguard/features/streams/adapters/terminal_adapter.py
What: TerminalPort implementation backed by ``os.isatty`` on the process stdout.
Why: Keep TTY detection in an adapter so use cases can run against a fake terminal.
"""

from __future__ import annotations

import io
import os
import sys

from ttyguard.features.streams.usecases.ports import TerminalPort


class ProcessTerminalAdapter(TerminalPort):
    """Production implementation checking the file descriptor behind ``sys.stdout``."""

    def is_stdout_tty(self) -> bool:
        try:
            return os.isatty(sys.stdout.fileno())
        except (AttributeError, ValueError, io.UnsupportedOperation):
            # Replaced or detached stdout (e.g. captured by a test runner).
            return False


__all__ = ["ProcessTerminalAdapter"]
