"""Copy command implementation."""

from typing import final

from ttyguard.application.services import CopyResult, copy_stream, open_input, open_output
from ttyguard.features.streams import ReadableStream, TerminalPort, WritableStream
from ttyguard.ui.cli.args.options import CopyArgs


@final
class CopyCommand:
    """Stream the input source into the output sink."""

    def __init__(
        self,
        args: CopyArgs,
        *,
        terminal: TerminalPort | None = None,
        stdin: ReadableStream | None = None,
        stdout: WritableStream | None = None,
    ) -> None:
        self.args = args
        self._stdin = stdin
        self._terminal = terminal
        self._stdout = stdout

    def execute(self) -> CopyResult:
        """Run the copy, releasing both handles on every exit path.

        Input is opened first so a missing input never leaves an empty output
        file behind. Nothing is read before the output has been accepted.
        """
        with open_input(self.args.input_path, stdin=self._stdin) as source:
            with open_output(
                self.args.output_path,
                self.args.deny_tty,
                terminal=self._terminal,
                stdout=self._stdout,
                limit=self.args.limit,
            ) as sink:
                return copy_stream(source, sink, chunk_size=self.args.chunk_size)


__all__ = ["CopyCommand"]
