"""Entry point for running ptouchprint as a module."""

import sys

from ptouchprint.cli.send import main

if __name__ == "__main__":
    sys.exit(main())
