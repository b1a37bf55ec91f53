import networkx as nx
import pytest

from pathmatrix.graph.strict_multidigraph import StrictMultiDiGraph


@pytest.fixture
def diamond():
    # Weight (undirected):
    #       [1]       [2]
    #   A ───────► B ───────► C ───────► D
    #   │                     ▲     [1]
    #   └─────────────────────┘
    #             [5]
    g = StrictMultiDiGraph()
    for node in ("A", "B", "C", "D"):
        g.add_node(node)

    g.add_link("A", "B", weight=1)
    g.add_link("B", "C", weight=2)
    g.add_link("A", "C", weight=5)
    g.add_link("C", "D", weight=1)
    return g


@pytest.fixture
def one_way_triangle():
    # Weight (directed):
    #   A ──[1]──► B ──[1]──► C
    #   ▲                     │
    #   └─────────[10]────────┘
    g = StrictMultiDiGraph()
    for node in ("A", "B", "C"):
        g.add_node(node)

    g.add_edge("A", "B", key=0, weight=1)
    g.add_edge("B", "C", key=1, weight=1)
    g.add_edge("C", "A", key=2, weight=10)
    return g


@pytest.fixture
def parallel_edges():
    # Three parallel arcs A->B with weights 4, 2, 3 and one arc B->C [1]
    g = StrictMultiDiGraph()
    for node in ("A", "B", "C"):
        g.add_node(node)

    g.add_edge("A", "B", key=0, weight=4)
    g.add_edge("A", "B", key=1, weight=2)
    g.add_edge("A", "B", key=2, weight=3)
    g.add_edge("B", "C", key=3, weight=1)
    return g


@pytest.fixture
def two_islands():
    # A◄──►B    C◄──►D   (no connection between the islands)
    g = StrictMultiDiGraph()
    for node in ("A", "B", "C", "D"):
        g.add_node(node)

    g.add_link("A", "B", weight=1)
    g.add_link("C", "D", weight=1)
    return g


@pytest.fixture
def simple_undirected():
    g = nx.Graph()
    g.add_edge(1, 2, weight=7)
    g.add_edge(1, 3, weight=9)
    g.add_edge(1, 6, weight=14)
    g.add_edge(2, 3, weight=10)
    g.add_edge(2, 4, weight=15)
    g.add_edge(3, 4, weight=11)
    g.add_edge(3, 6, weight=2)
    g.add_edge(4, 5, weight=6)
    g.add_edge(5, 6, weight=9)
    return g


@pytest.fixture
def random_digraph():
    g = nx.gnp_random_graph(30, 0.12, seed=7, directed=True)
    for i, (u, v) in enumerate(g.edges()):
        g[u][v]["weight"] = (i * 37) % 11 + 1
    return g
