"""Init-config command implementation."""

from typing import final

from ttyguard.config import Config
from ttyguard.ui.cli.args.options import InitConfigArgs


@final
class InitConfigCommand:
    """Write the default configuration template."""

    def __init__(self, args: InitConfigArgs) -> None:
        self.args = args

    def execute(self) -> bool:
        """Return True when a file was written."""

        defaults = Config()
        if self.args.force:
            _ = defaults.save(self.args.config_path)
            return True
        return defaults.save_if_missing(self.args.config_path)


__all__ = ["InitConfigCommand"]
