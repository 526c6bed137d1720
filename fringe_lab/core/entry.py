# fringe_lab/core/entry.py
# A FrontierEntry is one candidate in the fringe: a partial path through the
# graph plus the numbers the informed strategies rank it by.
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .labels import Label


@dataclass(frozen=True)
class FrontierEntry:
    path: Tuple[Label, ...]
    path_cost: float
    heuristic: float

    def __post_init__(self):
        # store an immutable copy so the entry can't change under the store
        object.__setattr__(self, "path", tuple(self.path))

    @property
    def terminal(self) -> Label:
        return self.path[-1]

    def combined_score(self) -> float:
        """f(n) = g(n) + h(n), the A* ranking."""
        return self.path_cost + self.heuristic

    def describe(self, sep: str = "-") -> str:
        return sep.join(str(label) for label in self.path)
