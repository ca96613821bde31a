"""Entry point for ``python -m binary_clock``."""

import sys

from binary_clock.cli import main

if __name__ == "__main__":
    sys.exit(main())
