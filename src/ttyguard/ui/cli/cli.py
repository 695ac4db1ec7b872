"""Command line interface for ttyguard."""

import os
import sys
from typing import final

from ttyguard.platform.logging import logger
from ttyguard.ui.cli.args import ArgumentParser
from ttyguard.ui.cli.args.options import CLIArgs, CopyArgs, InitConfigArgs
from ttyguard.ui.cli.commands import CopyCommand, InitConfigCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, CopyArgs):
                _ = CopyCommand(args).execute()
                return

            assert isinstance(args, InitConfigArgs)
            _ = InitConfigCommand(args).execute()
            return

        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)
        except BrokenPipeError:
            # Reader closed the pipe; keep the interpreter's final flush quiet.
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())
            sys.exit(1)
        except Exception as e:
            logger.error("%s", e)
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside ``CommandProcessor.process_command``.
    """
    CommandProcessor.process_command()
    return 0
