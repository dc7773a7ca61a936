from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from .git import discover_repo
from .models import DiffStat, Repository
from .stat_aggregate import aggregate_all, empty_tree_id
from .stat_pairs import pair
from .stat_walk import walk
from .stat_write import write_diff_stats_csv


def _note(msg: str, verbose: bool) -> None:
    if verbose:
        print(msg, file=sys.stderr)


def collect_diff_stats(repo: Repository, count: int, *, verbose: bool = False) -> list[DiffStat]:
    commits = walk(repo, count)
    pairs = pair(commits, count)
    _note(f"Walked {len(commits)} commit(s), {len(pairs)} diff(s) to compute", verbose)

    empty_tree = empty_tree_id(repo) if any(p.previous is None for p in pairs) else None
    return aggregate_all(repo, pairs, empty_tree)


def run_diff_stat(*, start: Path, count: int, out: TextIO, verbose: bool = False) -> int:
    repo = discover_repo(start)
    _note(f"Repository: {repo.root}", verbose)

    # Everything is computed before the first row goes out: a failed run writes no rows.
    stats = collect_diff_stats(repo, count, verbose=verbose)
    rows = write_diff_stats_csv(out, stats)
    _note(f"Wrote {rows} row(s)", verbose)
    return 0
