from __future__ import annotations

from typing import Optional, Sequence

from .models import CommitPair


def pair(commits: Sequence[str], limit: int) -> list[CommitPair]:
    """
    Turn a most-recent-first walk into (current, previous) pairs.

    A walk holding `limit + 1` commits yields `limit` pairs; the oldest commit
    only serves as the previous side of the last pair. A shorter walk reached
    the root, so its oldest commit is paired with None (the empty tree).
    """
    if not commits:
        return []

    previous_side: list[Optional[str]] = list(commits[1:])
    if len(commits) <= limit:
        previous_side.append(None)

    return [CommitPair(current=current, previous=previous) for current, previous in zip(commits, previous_side)]
