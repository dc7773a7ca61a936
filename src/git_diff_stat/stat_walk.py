from __future__ import annotations

from .errors import HistoryReadError
from .git import first_line, run_git
from .models import Repository


def _is_object_id(s: str) -> bool:
    return len(s) in (40, 64) and all(c in "0123456789abcdef" for c in s)


def is_unborn(repo: Repository) -> bool:
    """
    True when HEAD names a branch that does not exist yet, as in a freshly
    initialised repository. A branch pointing at a missing object is not unborn.
    """
    code, out, _ = run_git(["symbolic-ref", "-q", "HEAD"], cwd=repo.root)
    ref = out.strip()
    if code != 0 or not ref:
        return False
    code, _, _ = run_git(["show-ref", "--verify", "--quiet", ref], cwd=repo.root)
    return code == 1


def walk(repo: Repository, limit: int) -> list[str]:
    """
    Commit ids reachable from HEAD along first parents, most recent first.

    At most `limit + 1` ids are returned: `limit` diffs need one commit more
    than they report on. A shorter history is returned as-is; an unborn HEAD
    gives an empty list.
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    if is_unborn(repo):
        return []

    code, out, err = run_git(
        ["rev-list", "--first-parent", f"--max-count={limit + 1}", "HEAD"],
        cwd=repo.root,
    )
    if code != 0:
        raise HistoryReadError(f"git rev-list exited {code}: {first_line(err) or 'no error output'}")

    commits: list[str] = []
    for line in out.splitlines():
        sha = line.strip()
        if not sha:
            continue
        if not _is_object_id(sha):
            raise HistoryReadError(f"git rev-list produced an unexpected line: {sha[:80]!r}")
        commits.append(sha)
    return commits
