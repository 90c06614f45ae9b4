"""Allow ``python -m tictac_cube``."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
