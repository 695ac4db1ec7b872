"""
Summary: Stream kinds and fixed constants shared by the stream selectors and writer.
Why: Keep the truncation limit and trailer bytes in one place for every layer.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Final

# Assumed terminal of 80 columns by 20 rows.
DEFAULT_TRUNCATION_LIMIT: Final[int] = 20 * 80

TRUNCATED_TTY_MESSAGE: Final[bytes] = (
    b"\n[truncated; use a pipe, a redirect, or --output to see full message]\n"
)


class StreamKind(StrEnum):
    """Which variant backs an input source or output sink."""

    FILE = "file"
    STANDARD = "standard"


__all__ = ["DEFAULT_TRUNCATION_LIMIT", "TRUNCATED_TTY_MESSAGE", "StreamKind"]
