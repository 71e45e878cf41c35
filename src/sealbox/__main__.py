"""Allows ``python -m sealbox``."""

import sys

from sealbox.frontend.cli.app import main

if __name__ == "__main__":
    sys.exit(main())
