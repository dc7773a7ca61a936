from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional

from .errors import RepositoryUnavailable
from .models import Repository


def run_git(args: list[str], cwd: Path, timeout_s: int = 300, stdin_text: Optional[str] = None) -> tuple[int, str, str]:
    try:
        proc = subprocess.run(
            ["git", *args],
            cwd=str(cwd),
            input=stdin_text,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout_s,
        )
    except subprocess.TimeoutExpired:
        return -1, "", f"git {args[0]} timed out after {timeout_s}s"
    except OSError as e:
        return -1, "", f"failed to start git {args[0]}: {e}"
    return proc.returncode, proc.stdout, proc.stderr


def first_line(text: str) -> str:
    for line in (text or "").splitlines():
        line = line.strip()
        if line:
            return line
    return ""


def discover_repo(start: Path) -> Repository:
    """
    Locate the repository enclosing `start` the way git itself does: search
    upward for the first work tree (or bare git dir), honouring
    GIT_CEILING_DIRECTORIES and friends from the environment.
    """
    if not start.is_dir():
        raise RepositoryUnavailable(f"cannot search for a repository from {start}: not a directory")

    code, out, err = run_git(["rev-parse", "--show-toplevel"], cwd=start)
    if code == 0 and out.strip():
        return Repository(root=Path(out.strip()).resolve())

    # Bare repositories and the inside of a .git dir have no work tree.
    code2, out2, _ = run_git(["rev-parse", "--absolute-git-dir"], cwd=start)
    if code2 == 0 and out2.strip():
        return Repository(root=Path(out2.strip()).resolve())

    reason = first_line(err) or "not a git repository"
    raise RepositoryUnavailable(f"no git repository found from {start}: {reason}")
