# fringe_lab/core/random_source.py
# Randomness is injected so a seeded source (or a scripted fake in tests)
# gives the same fringe every time.
from __future__ import annotations
import random
from typing import Optional, Protocol

import numpy as np


class RandomSource(Protocol):
    """Anything with randint(low, high) returning an int in [low, high]. random.Random qualifies."""
    def randint(self, low: int, high: int) -> int: ...


class NumpyRandomSource:
    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    def randint(self, low: int, high: int) -> int:
        if low > high:
            raise ValueError(f"empty range [{low}, {high}]")
        return int(self.rng.integers(low, high, endpoint=True))


def make_random_source(seed: Optional[int] = None, backend: str = "stdlib") -> RandomSource:
    if backend == "stdlib":
        return random.Random(seed)
    if backend == "numpy":
        return NumpyRandomSource(seed)
    raise ValueError(f"unknown random backend {backend!r} (expected 'stdlib' or 'numpy')")
