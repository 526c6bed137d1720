# fringe_lab/core/store.py
# The fringe as an ordered list of FrontierEntry values. Insertion order is
# the recency information BFS (front) and DFS (back) depend on; the costed
# strategies pick the earliest of the tied minimum entries.
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Iterator, List, Sequence, Tuple

from .entry import FrontierEntry
from .errors import EmptyStoreError
from .labels import DEFAULT_ALPHABET, Label, LabelAlphabet
from .random_source import RandomSource
from .strategies import Strategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntryBounds:
    """Inclusive ranges used by the random entry generator."""
    min_path: int = 2
    max_path: int = 9
    min_cost: int = 1
    max_cost: int = 14


class FrontierStore:
    def __init__(self, rng: RandomSource, alphabet: LabelAlphabet = DEFAULT_ALPHABET,
                 bounds: EntryBounds = EntryBounds()):
        self.rng = rng
        self.alphabet = alphabet
        self.bounds = bounds
        self._entries: List[FrontierEntry] = []

    def __len__(self): return len(self._entries)
    def __iter__(self) -> Iterator[FrontierEntry]: return iter(tuple(self._entries))
    def is_empty(self) -> bool: return not self._entries

    @property
    def entries(self) -> Tuple[FrontierEntry, ...]:
        return tuple(self._entries)

    # --- building ------------------------------------------------------------

    def add_entry(self, path: Sequence[Label], path_cost: float, heuristic: float) -> FrontierEntry:
        entry = FrontierEntry(path, path_cost, heuristic)
        self._entries.append(entry)
        return entry

    def random_entry(self) -> FrontierEntry:
        """Random path and cost; heuristic comes from the path's last label."""
        b = self.bounds
        length = self.rng.randint(b.min_path, b.max_path)
        last = len(self.alphabet) - 1
        path = tuple(self.alphabet.symbols[self.rng.randint(0, last)] for _ in range(length))
        cost = self.rng.randint(b.min_cost, b.max_cost)
        return FrontierEntry(path, cost, self.alphabet.heuristic_for_path(path))

    def populate_random(self, count: int) -> None:
        if count < 1:
            raise ValueError(f"count must be a positive integer, got {count!r}")
        self._entries = [self.random_entry() for _ in range(count)]
        logger.debug("populated fringe with %d random entries", count)

    # --- queries ---------------------------------------------------------------

    def _lowest(self, key: Callable[[FrontierEntry], float], operation: str) -> List[int]:
        if not self._entries:
            raise EmptyStoreError(operation)
        best = min(key(e) for e in self._entries)
        return [i for i, e in enumerate(self._entries) if key(e) == best]

    def lowest_cost_indices(self) -> List[int]:
        return self._lowest(lambda e: e.path_cost, "lowest_cost_indices")

    def lowest_heuristic_indices(self) -> List[int]:
        return self._lowest(lambda e: e.heuristic, "lowest_heuristic_indices")

    def lowest_combined_score_indices(self) -> List[int]:
        return self._lowest(FrontierEntry.combined_score, "lowest_combined_score_indices")

    def candidate_indices(self, strategy) -> List[int]:
        """Every position the strategy could legally expand next (ties included)."""
        strategy = Strategy.parse(strategy)
        if not self._entries:
            raise EmptyStoreError(f"candidate_indices({strategy.value})")
        if strategy is Strategy.BREADTH_FIRST:
            return [0]
        if strategy is Strategy.DEPTH_FIRST:
            return [len(self._entries) - 1]
        if strategy is Strategy.UNIFORM_COST:
            return self.lowest_cost_indices()
        if strategy is Strategy.GREEDY:
            return self.lowest_heuristic_indices()
        return self.lowest_combined_score_indices()

    # --- removal ---------------------------------------------------------------

    def remove_next(self, strategy) -> FrontierEntry:
        """Remove and return the entry the given strategy would expand next.

        BFS takes the front (least recently added), DFS the back (most recently
        added). UCS, Greedy and A* take the lowest path cost, heuristic and
        g + h respectively, breaking ties by earliest insertion.
        """
        strategy = Strategy.parse(strategy)
        if not self._entries:
            raise EmptyStoreError(f"remove_next({strategy.value})")
        index = self.candidate_indices(strategy)[0]
        entry = self._entries.pop(index)
        logger.debug("%s removed %s at position %d", strategy.value, entry.describe(), index)
        return entry
