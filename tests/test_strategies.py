import pytest

from fringe_lab.core.errors import UnknownStrategyError
from fringe_lab.core.strategies import Strategy


@pytest.mark.parametrize("value,expected", [
    ("BFS", Strategy.BREADTH_FIRST),
    ("DFS", Strategy.DEPTH_FIRST),
    ("UCS", Strategy.UNIFORM_COST),
    ("Greedy", Strategy.GREEDY),
    ("A*", Strategy.A_STAR),
    ("a_star", Strategy.A_STAR),
    ("uniform_cost", Strategy.UNIFORM_COST),
    ("bfs", Strategy.BREADTH_FIRST),
    ("ucs", Strategy.UNIFORM_COST),
    ("a*", Strategy.A_STAR),
    ("GREEDY", Strategy.GREEDY),
    (Strategy.GREEDY, Strategy.GREEDY),
])
def test_parse(value, expected):
    assert Strategy.parse(value) is expected


@pytest.mark.parametrize("value", ["IDS", "bfs-ish", "", None, 3])
def test_parse_rejects_unknown(value):
    with pytest.raises(UnknownStrategyError) as info:
        Strategy.parse(value)
    assert info.value.value == value
    assert isinstance(info.value, ValueError)


def test_long_names():
    assert Strategy.A_STAR.long_name == "A* search"
