"""Allow `python -m claude_commit`."""

import sys

from claude_commit.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
