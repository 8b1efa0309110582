"""Main entry point for songcatalog."""

import sys

from songcatalog.cli.main import cli

if __name__ == "__main__":
    sys.exit(cli())
