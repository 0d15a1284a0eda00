"""
Executable module for bumpwise.

Running ``python -m bumpwise`` is equivalent to running ``bumpwise``.
"""

from __future__ import annotations

import sys


def main() -> int:
    """Entry point for ``python -m bumpwise``.

    Returns:
        Exit code returned by the CLI.
    """
    from bumpwise.cli import main as cli_main

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
