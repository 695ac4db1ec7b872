"""Command line argument parsing."""

from .options import CLIArgs, CopyArgs, InitConfigArgs
from .parser import ArgumentParser

__all__ = ["ArgumentParser", "CLIArgs", "CopyArgs", "InitConfigArgs"]
