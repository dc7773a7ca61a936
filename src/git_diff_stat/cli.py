from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import __version__
from .config import DEFAULT_CONFIG_PATH, DEFAULT_COUNT, load_config, resolve_count
from .errors import DiffStatError
from .stat_run import run_diff_stat


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git-diff-stat",
        description="Export git diff stats (insertions, deletions) of the most recent commits as CSV.",
        epilog="git-diff-stat searches for a git repository the same way git does.",
    )
    parser.add_argument(
        "-n",
        "--count",
        type=str,
        nargs="?",
        default=None,
        help=f"Number of commits to show diff stats for (default: {DEFAULT_COUNT}; invalid values use the default).",
    )
    parser.add_argument("--repo", type=Path, default=Path("."), help="Directory to start searching for the repository from.")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Path to a JSON config file (optional).")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print progress notes to stderr.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        config = load_config(args.config)
        count = resolve_count(args.count, config)
        return run_diff_stat(start=args.repo, count=count, out=sys.stdout, verbose=bool(args.verbose))
    except DiffStatError as e:
        print(f"git-diff-stat: error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
