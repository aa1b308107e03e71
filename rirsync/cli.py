"""Command that synchronises all registry databases into a working folder."""

from __future__ import annotations

import argparse
import os
import sys
import tempfile
from collections.abc import Sequence

from .folder import Folder
from .rir import Rir

DEFAULT_FOLDER = os.path.join(tempfile.gettempdir(), "rirs")


def main(argv: Sequence[str] | None = None) -> int:
    """Run a full synchronisation; returns the process exit status."""
    parser = argparse.ArgumentParser(
        prog="rirsync",
        description="Download regional registry databases and store them as JSON.",
    )
    parser.add_argument(
        "--folder",
        default=DEFAULT_FOLDER,
        help=f"working folder (default: {DEFAULT_FOLDER})",
    )
    args = parser.parse_args(argv)

    try:
        Rir(Folder(args.folder)).sync()
    except (OSError, ValueError) as err:
        print(f"rirsync: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())