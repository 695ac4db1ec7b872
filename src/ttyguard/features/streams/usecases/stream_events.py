"""src/ttyguard/features/streams/usecases/stream_events.py
What: Structured event identifiers attached to stream log records.
Why: Let the Rich console handler style stream activity consistently.
"""

from __future__ import annotations

from enum import StrEnum


class StreamEvent(StrEnum):
    """Structured event identifiers for stream adapter logs."""

    INPUT_OPEN = "stream.input.open"
    OUTPUT_OPEN = "stream.output.open"
    OUTPUT_REFUSED = "stream.output.refused"
    OUTPUT_TRUNCATED = "stream.output.truncated"
    WRITE_REJECTED = "stream.write.rejected"
    COPY_COMPLETE = "stream.copy.complete"


__all__ = ["StreamEvent"]
