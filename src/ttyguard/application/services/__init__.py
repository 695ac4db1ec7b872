"""Application services composing the stream feature with process adapters."""

from __future__ import annotations

from .stream_service import CopyResult, copy_stream, open_input, open_output

__all__ = ["CopyResult", "copy_stream", "open_input", "open_output"]
