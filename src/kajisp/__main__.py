"""
CLI entry point for the Kajisp shell.

This allows the shell to be run as:
    python -m kajisp
"""

import sys
from kajisp.kajisp_repl import main

if __name__ == "__main__":
    sys.exit(main())
