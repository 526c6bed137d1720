import matplotlib
matplotlib.use("Agg")

import pytest

from fringe_lab.core.store import FrontierStore


class ScriptedRandom:
    """Replays a fixed sequence of draws, checking each one is in range."""
    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randint(self, low, high):
        value = self.values.pop(0)
        assert low <= value <= high, f"scripted {value} outside [{low}, {high}]"
        self.calls.append((low, high))
        return value


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def abc_store():
    """A(cost 3, h 5), B(cost 1, h 9), C(cost 1, h 2), added in that order."""
    store = FrontierStore(rng=ScriptedRandom([]))
    store.add_entry(["S", "A"], 3, 5)
    store.add_entry(["S", "B"], 1, 9)
    store.add_entry(["S", "C"], 1, 2)
    return store
