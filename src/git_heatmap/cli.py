from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .heatmap_run import run_heatmap
from .heatmap_window import DEFAULT_WEEKS

VERSION = "0.1.0"


def _non_negative_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}")
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git-heatmap",
        description="Render a terminal heatmap of your commits across local git repos.",
    )
    parser.add_argument("-u", "--user", type=str, default=None, help="Author email to chart (default: git config user.email).")
    parser.add_argument(
        "-p",
        "--path",
        dest="paths",
        type=Path,
        nargs="+",
        default=[Path(".")],
        help="Repositories to scan (default: current directory).",
    )
    parser.add_argument(
        "-w",
        "--weeks",
        type=_non_negative_int,
        default=DEFAULT_WEEKS,
        help=f"Number of weeks in the past to show (default: {DEFAULT_WEEKS}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Plain glyphs instead of 256-colour squares.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print scan progress to stderr.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    args = _build_parser().parse_args(argv)
    return run_heatmap(args)


if __name__ == "__main__":
    raise SystemExit(main())
