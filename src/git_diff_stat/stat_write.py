from __future__ import annotations

import csv
from typing import Iterable, TextIO

from .errors import OutputError
from .models import DiffStat

FIELDNAMES = ["commit_id", "insertions", "deletions"]


def write_diff_stats_csv(out: TextIO, stats: Iterable[DiffStat]) -> int:
    rows = 0
    try:
        writer = csv.writer(out, lineterminator="\n")
        writer.writerow(FIELDNAMES)
        for st in stats:
            writer.writerow([st.commit_id, int(st.insertions), int(st.deletions)])
            rows += 1
        out.flush()
    except (OSError, ValueError) as e:
        raise OutputError(f"failed to write diff stats: {e}") from e
    return rows
