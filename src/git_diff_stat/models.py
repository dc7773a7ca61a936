from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Optional


@dataclasses.dataclass(frozen=True)
class Repository:
    root: Path


@dataclasses.dataclass(frozen=True)
class CommitPair:
    current: str
    previous: Optional[str]  # None: history exhausted, diff against the empty tree


@dataclasses.dataclass(frozen=True)
class DiffStat:
    commit_id: str
    insertions: int
    deletions: int

    @property
    def changed(self) -> int:
        return self.insertions + self.deletions
