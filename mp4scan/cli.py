"""Command line entry point: print the box structure of an MP4 file."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .binary import ParseError
from .header import Mp4Header


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mp4scan", description="Print the box structure of an MP4 file."
    )
    parser.add_argument("-f", "--file", required=True, help="MP4 file to read")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse the file named on the command line and print its report."""
    args = _parser().parse_args(argv)
    try:
        header = Mp4Header.parse(args.file)
    except (OSError, ParseError) as exc:
        print(f"mp4scan: {exc}", file=sys.stderr)
        return 1
    header.print_comp()
    return 0


if __name__ == "__main__":
    sys.exit(main())