"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import final

from ttyguard.config import Config, RuntimeSettings, default_config_path
from ttyguard.platform.logging import logger, setup_logger
from ttyguard.ui.cli.args.options import CLIArgs, CopyArgs, InitConfigArgs


def _positive_int(raw: str) -> int:
    """argparse ``type`` accepting only integers greater than zero."""

    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {raw!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return value


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="ttyguard",
            description="Copy a file or stdin to a new file or stdout, keeping terminals safe.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        copy_parser = subparsers.add_parser(
            "copy",
            help="Copy INPUT (or stdin) to --output (or stdout)",
        )
        _ = copy_parser.add_argument(
            "input",
            nargs="?",
            type=str,
            help="File to read; standard input when omitted",
            metavar="INPUT",
        )
        _ = copy_parser.add_argument(
            "-o",
            "--output",
            type=str,
            help="File to create; it must not already exist",
            metavar="OUTPUT",
        )
        _ = copy_parser.add_argument(
            "--deny-tty",
            action="store_true",
            help="Fail instead of writing to an interactive terminal",
        )
        _ = copy_parser.add_argument(
            "--limit",
            type=_positive_int,
            help="Bytes shown on a terminal before truncating (overrides config)",
            metavar="BYTES",
        )
        verbosity = copy_parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed stream information on stderr",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all diagnostics except errors",
        )

        init_parser = subparsers.add_parser(
            "init-config",
            help="Write the default configuration file if it does not exist",
        )
        _ = init_parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite an existing configuration file",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: On invalid arguments.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        command: str = parsed_args.command

        if command == "copy":
            return ArgumentParser._process_copy(parsed_args, configuration)

        if command == "init-config":
            return InitConfigArgs(
                command="init-config",
                config_path=default_config_path(),
                force=parsed_args.force,
            )

        logger.error("Unsupported command: %s", command)
        parser.exit(2)

    @staticmethod
    def _process_copy(parsed_args: argparse.Namespace, configuration: Config) -> CopyArgs:
        settings = RuntimeSettings.from_config(configuration)
        limit: int = parsed_args.limit or settings.truncation_limit

        return CopyArgs(
            command="copy",
            input_path=Path(parsed_args.input) if parsed_args.input else None,
            output_path=Path(parsed_args.output) if parsed_args.output else None,
            deny_tty=parsed_args.deny_tty,
            limit=limit,
            chunk_size=settings.copy_chunk_size,
        )


__all__ = ["ArgumentParser"]
