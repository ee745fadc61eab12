"""Entry point for ``python -m vaultmend``."""

import sys

from vaultmend.cli import main

if __name__ == "__main__":
    sys.exit(main())
