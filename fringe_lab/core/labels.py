# fringe_lab/core/labels.py
# Node labels are opaque symbols with a fixed total order; the heuristic of a
# label is its position in that order plus an offset.
from __future__ import annotations
from dataclasses import dataclass
from typing import Hashable, Sequence, Tuple

Label = Hashable


@dataclass(frozen=True)
class LabelAlphabet:
    """Ordered, finite set of node labels with a deterministic label -> int heuristic."""
    symbols: Tuple[Label, ...]
    offset: int = 0

    def __post_init__(self):
        if len(set(self.symbols)) != len(self.symbols):
            raise ValueError("alphabet symbols must be distinct")

    def __len__(self): return len(self.symbols)
    def __contains__(self, label): return label in self.symbols

    def heuristic(self, label: Label) -> int:
        try:
            return self.symbols.index(label) + self.offset
        except ValueError:
            raise ValueError(f"label {label!r} is not in the alphabet") from None

    def heuristic_for_path(self, path: Sequence[Label]) -> int:
        # only the terminal node matters
        if not path:
            raise ValueError("cannot compute a heuristic for an empty path")
        return self.heuristic(path[-1])


# 'A'..'T' with A -> 5, i.e. ord(label) - 60
DEFAULT_ALPHABET = LabelAlphabet(symbols=tuple("ABCDEFGHIJKLMNOPQRST"), offset=5)
