"""Allow ``python -m bytepace``."""

import sys

from bytepace.cli import main

if __name__ == "__main__":
    sys.exit(main())
