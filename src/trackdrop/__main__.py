"""Allow ``python -m trackdrop``."""

import sys

from trackdrop.ui.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
