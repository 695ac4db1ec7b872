"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class CopyArgs:
    """Command line arguments for the ``copy`` subcommand."""

    command: Literal["copy"]
    input_path: Path | None
    output_path: Path | None
    deny_tty: bool
    limit: int
    chunk_size: int


@final
@dataclass(slots=True)
class InitConfigArgs:
    """Command line arguments for the ``init-config`` subcommand."""

    command: Literal["init-config"]
    config_path: Path
    force: bool


CLIArgs = CopyArgs | InitConfigArgs

__all__ = ["CLIArgs", "CopyArgs", "InitConfigArgs"]
