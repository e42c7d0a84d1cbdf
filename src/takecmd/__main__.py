"""Allow ``python -m takecmd``."""

import sys

from takecmd.cli import main

if __name__ == "__main__":
    sys.exit(main())
