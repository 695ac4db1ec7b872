"""src/ttyguard/features/streams/adapters/stdio_adapter.py
What: Accessors for the binary layers of the process standard streams.
Why: Resolve ``sys.stdin``/``sys.stdout`` lazily so replaced streams are honoured.
"""

from __future__ import annotations

import sys
from typing import BinaryIO


def standard_input() -> BinaryIO:
    """Return the binary buffer behind ``sys.stdin``."""

    return sys.stdin.buffer


def standard_output() -> BinaryIO:
    """Return the binary buffer behind ``sys.stdout``."""

    return sys.stdout.buffer


__all__ = ["standard_input", "standard_output"]
