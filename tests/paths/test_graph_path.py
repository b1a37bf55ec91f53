import pytest

from pathmatrix.paths.path import GraphPath


def test_basic_properties():
    p = GraphPath(nodes=("A", "B", "C"), edges=(("A", "B", 0), ("B", "C", 1)), weight=3)
    assert p.src_node == "A"
    assert p.dst_node == "C"
    assert len(p) == 2
    assert list(p) == ["A", "B", "C"]
    assert not p.is_trivial
    assert p.node_set == frozenset({"A", "B", "C"})


def test_trivial():
    p = GraphPath.trivial("X")
    assert p.nodes == ("X",)
    assert p.edges == ()
    assert p.weight == 0
    assert p.is_trivial
    assert p.src_node == p.dst_node == "X"


def test_mismatched_sequences():
    with pytest.raises(ValueError):
        GraphPath(nodes=(), edges=(), weight=0)
    with pytest.raises(ValueError):
        GraphPath(nodes=("A", "B"), edges=(), weight=1)


def test_equality_hash_and_ordering():
    a = GraphPath(nodes=("A", "B"), edges=(("A", "B"),), weight=1)
    b = GraphPath(nodes=("A", "B"), edges=(("A", "B"),), weight=1)
    c = GraphPath(nodes=("A", "C", "B"), edges=(("A", "C"), ("C", "B")), weight=2)
    assert a == b
    assert hash(a) == hash(b)
    assert a < c
    assert sorted([c, a]) == [a, c]
    assert a.__lt__("x") is NotImplemented


def test_immutable():
    p = GraphPath.trivial("A")
    with pytest.raises(AttributeError):
        p.weight = 5  # type: ignore[misc]


def test_to_dict_and_repr():
    p = GraphPath(nodes=("A", "B"), edges=(("A", "B", 0),), weight=1.5)
    assert p.to_dict() == {"nodes": ["A", "B"], "edges": [["A", "B", 0]], "weight": 1.5}
    assert repr(p) == "GraphPath(['A', 'B'], weight=1.5)"
