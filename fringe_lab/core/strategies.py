# fringe_lab/core/strategies.py
# The five search strategies a quiz can ask about. Values match the short
# names used in the question text (BFS, DFS, UCS, Greedy, A*).
from __future__ import annotations
from enum import Enum

from .errors import UnknownStrategyError


class Strategy(str, Enum):
    BREADTH_FIRST = "BFS"
    DEPTH_FIRST = "DFS"
    UNIFORM_COST = "UCS"
    GREEDY = "Greedy"
    A_STAR = "A*"

    @property
    def long_name(self) -> str:
        return _LONG_NAMES[self]

    @classmethod
    def parse(cls, value) -> "Strategy":
        """Accept a Strategy, its value ("BFS", "a*") or its member name ("breadth_first"), any case."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for s in cls:
                if value.upper() in (s.value.upper(), s.name):
                    return s
        raise UnknownStrategyError(value)


_LONG_NAMES = {
    Strategy.BREADTH_FIRST: "breadth-first search",
    Strategy.DEPTH_FIRST: "depth-first search",
    Strategy.UNIFORM_COST: "uniform-cost search",
    Strategy.GREEDY: "greedy best-first search",
    Strategy.A_STAR: "A* search",
}
