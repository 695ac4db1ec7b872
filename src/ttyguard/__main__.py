"""Allow ``python -m ttyguard``."""

import sys

from ttyguard.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
