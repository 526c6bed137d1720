# fringe_lab/plots/tables.py
# Tabular view of a fringe for printing next to a question.
from __future__ import annotations
from typing import Sequence

import pandas as pd

from ..core.entry import FrontierEntry

COLUMNS = ["path", "cost", "heuristic", "score"]


def frontier_table(entries: Sequence[FrontierEntry]) -> pd.DataFrame:
    rows = [
        {"path": e.describe(), "cost": e.path_cost, "heuristic": e.heuristic, "score": e.combined_score()}
        for e in entries
    ]
    df = pd.DataFrame(rows, columns=COLUMNS)
    df.index.name = "position"
    return df
