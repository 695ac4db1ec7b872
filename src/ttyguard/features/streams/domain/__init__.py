"""Domain constants and errors for the streams feature."""

from __future__ import annotations

from .errors import InteractiveRefusedError, TtyGuardError, UnprintableContentError
from .models import DEFAULT_TRUNCATION_LIMIT, TRUNCATED_TTY_MESSAGE, StreamKind

__all__ = [
    "DEFAULT_TRUNCATION_LIMIT",
    "TRUNCATED_TTY_MESSAGE",
    "InteractiveRefusedError",
    "StreamKind",
    "TtyGuardError",
    "UnprintableContentError",
]
