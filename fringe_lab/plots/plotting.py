# fringe_lab/plots/plotting.py
# Grouped bar chart of a fringe: path cost, heuristic and g + h for every
# position, so the UCS / Greedy / A* choices can be read off at a glance.
from __future__ import annotations
import io
from typing import Iterable, Sequence

import matplotlib.pyplot as plt

from ..core.entry import FrontierEntry
from ..core.errors import EmptyStoreError


def plot_frontier(entries: Sequence[FrontierEntry], title: str = "Search Fringe",
                  highlight: Iterable[int] = ()):
    if not entries:
        raise EmptyStoreError("plot_frontier")
    highlight = set(highlight)
    x = list(range(len(entries)))
    width = 0.27

    fig, ax = plt.subplots(figsize=(max(6, len(entries) * 1.1), 4))
    ax.bar([i - width for i in x], [e.path_cost for e in entries], width, label="path cost")
    ax.bar(x, [e.heuristic for e in entries], width, label="heuristic")
    bars = ax.bar([i + width for i in x], [e.combined_score() for e in entries], width, label="g + h")
    for i in highlight:
        if 0 <= i < len(entries):
            bars[i].set_edgecolor("black"); bars[i].set_linewidth(2)

    ax.set_title(title)
    ax.set_ylabel("value")
    ax.set_xticks(x)
    ax.set_xticklabels([f"{i}\n{e.describe()}" for i, e in enumerate(entries)], fontsize=8)
    ax.legend()
    fig.tight_layout()
    return fig


def fig_to_png_bytes(fig) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=160)
    return buf.getvalue()
