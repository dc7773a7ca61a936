from __future__ import annotations

from typing import Iterable, Optional

from .errors import CommitResolutionError, DiffComputationError
from .git import first_line, run_git
from .models import CommitPair, DiffStat, Repository


def empty_tree_id(repo: Repository) -> str:
    # Hashed rather than hardcoded so SHA-256 repositories get their own id.
    code, out, err = run_git(["hash-object", "-t", "tree", "--stdin"], cwd=repo.root, stdin_text="")
    tree = out.strip()
    if code != 0 or not tree:
        raise CommitResolutionError(f"cannot compute the empty tree id: {first_line(err) or f'git exited {code}'}")
    return tree


def resolve_tree(repo: Repository, commit: str) -> str:
    code, out, err = run_git(["rev-parse", "--verify", "--quiet", f"{commit}^{{tree}}"], cwd=repo.root)
    tree = out.strip()
    if code != 0 or not tree:
        detail = first_line(err) or "unknown commit or missing tree"
        raise CommitResolutionError(f"cannot resolve commit {commit}: {detail}")
    return tree


def parse_numstat(output: str) -> tuple[int, int]:
    insertions = 0
    deletions = 0
    for raw_line in output.splitlines():
        line = raw_line.rstrip("\n")
        if not line:
            continue
        parts = line.split("\t", 2)
        if len(parts) < 3:
            continue
        added_s, deleted_s = parts[0], parts[1]
        if added_s == "-" or deleted_s == "-":
            # binary
            continue
        try:
            added = int(added_s)
            deleted = int(deleted_s)
        except ValueError:
            continue
        insertions += added
        deletions += deleted
    return insertions, deletions


def diff_trees(repo: Repository, old_tree: str, new_tree: str) -> tuple[int, int]:
    code, out, err = run_git(["diff-tree", "-r", "--numstat", "--no-renames", old_tree, new_tree], cwd=repo.root)
    if code != 0:
        detail = first_line(err) or f"git diff-tree exited {code}"
        raise DiffComputationError(f"cannot diff {old_tree}..{new_tree}: {detail}")
    return parse_numstat(out)


def aggregate(repo: Repository, pair: CommitPair, empty_tree: Optional[str] = None) -> DiffStat:
    """
    Insertions and deletions going from `pair.previous` (or the empty tree)
    to `pair.current`, as counted by git.
    """
    current_tree = resolve_tree(repo, pair.current)
    if pair.previous is not None:
        previous_tree = resolve_tree(repo, pair.previous)
    else:
        previous_tree = empty_tree if empty_tree is not None else empty_tree_id(repo)

    insertions, deletions = diff_trees(repo, previous_tree, current_tree)
    return DiffStat(commit_id=pair.current, insertions=insertions, deletions=deletions)


def aggregate_all(repo: Repository, pairs: Iterable[CommitPair], empty_tree: Optional[str] = None) -> list[DiffStat]:
    # Fail fast: the first error stops aggregation of the remaining pairs.
    return [aggregate(repo, p, empty_tree) for p in pairs]
