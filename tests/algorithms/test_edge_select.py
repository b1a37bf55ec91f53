import networkx as nx
import pytest

from pathmatrix.algorithms.edge_select import (
    edge_weight,
    iter_in_edges,
    iter_out_edges,
    select_min_weight_edge,
)


def test_edge_weight_default_and_negative():
    assert edge_weight({}, "weight") == 1
    assert edge_weight({"weight": 2.5}, "weight") == 2.5
    with pytest.raises(ValueError):
        edge_weight({"weight": -1}, "weight")


def test_select_min_weight_edge_multigraph():
    edges = {"x": {"weight": 3}, "y": {"weight": 1}, "z": {"weight": 1}}
    assert select_min_weight_edge("A", "B", edges, "weight", True) == (1, ("A", "B", "y"))


def test_select_min_weight_edge_simple():
    assert select_min_weight_edge("A", "B", {"weight": 4}, "weight", False) == (
        4,
        ("A", "B"),
    )


def test_iter_out_and_in_edges(one_way_triangle):
    assert list(iter_out_edges(one_way_triangle, "C", "weight")) == [
        ("A", 10, ("C", "A", 2))
    ]
    assert list(iter_in_edges(one_way_triangle, "C", "weight")) == [
        ("B", 1, ("B", "C", 1))
    ]


def test_iter_edges_undirected():
    g = nx.Graph()
    g.add_edge("A", "B", weight=2)
    assert list(iter_in_edges(g, "A", "weight")) == [("B", 2, ("B", "A"))]
    assert list(iter_out_edges(g, "A", "weight")) == [("B", 2, ("A", "B"))]
