"""Allow ``python -m lvlog``."""

import sys

from lvlog.cli import main

if __name__ == "__main__":
    sys.exit(main())
