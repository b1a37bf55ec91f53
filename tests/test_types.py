import math

from pathmatrix.types import INFINITE_WEIGHT, SourceTargetPair


def test_pair_is_ordered():
    assert SourceTargetPair("a", "b") != SourceTargetPair("b", "a")
    assert SourceTargetPair("a", "a") == SourceTargetPair("a", "a")
    assert hash(SourceTargetPair("a", "b")) == hash(("a", "b"))
    assert len({SourceTargetPair("a", "b"), SourceTargetPair("b", "a")}) == 2


def test_pair_fields():
    pair = SourceTargetPair(source=1, target=2)
    assert pair.source == 1
    assert pair.target == 2


def test_infinite_weight_compares():
    assert INFINITE_WEIGHT == math.inf
    assert INFINITE_WEIGHT > 1e308
    assert not INFINITE_WEIGHT < 0
