"""Allow running the CLI with ``python -m pyheroicons``."""

import sys

from pyheroicons.cli import main

if __name__ == "__main__":
    sys.exit(main())
