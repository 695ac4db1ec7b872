# Where: ttyguard.features.streams.adapters
# What: Process-backed implementations of the stream ports.
# Why: Keep sys/os access out of the use case layer.

from .stdio_adapter import standard_input, standard_output
from .terminal_adapter import ProcessTerminalAdapter

__all__ = ["ProcessTerminalAdapter", "standard_input", "standard_output"]
