"""Command implementations."""

from .copy import CopyCommand
from .init_config import InitConfigCommand

__all__ = ["CopyCommand", "InitConfigCommand"]
