"""Edge selection between a pair of adjacent nodes.

Multigraphs may hold several parallel edges between two nodes; shortest path
searches only ever need the cheapest one. These helpers hide the difference
between simple and multi graphs from the search loops.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, Optional, Tuple

from pathmatrix.types import EdgeRef, NodeID, Weight


def edge_weight(attrs: Dict[str, Any], weight_attr: str) -> Weight:
    """Return the weight stored in an edge attribute dict.

    A missing attribute counts as 1, following networkx conventions.

    Raises:
        ValueError: If the weight is negative.
    """
    weight = attrs.get(weight_attr, 1)
    if weight < 0:
        raise ValueError(
            f"Negative edge weight {weight!r} is not supported by shortest path search."
        )
    return weight


def select_min_weight_edge(
    u: NodeID,
    v: NodeID,
    edges_data: Dict[Any, Any],
    weight_attr: str,
    multigraph: bool,
) -> Tuple[Weight, EdgeRef]:
    """Pick the cheapest edge from u to v.

    Args:
        u: Tail of the edge.
        v: Head of the edge.
        edges_data: Adjacency payload for (u, v): ``{key: attrs}`` on
            multigraphs, the attribute dict itself on simple graphs.
        weight_attr: Edge attribute holding the weight.
        multigraph: Whether ``edges_data`` is keyed by edge key.

    Returns:
        Tuple of ``(weight, edge_ref)``.
    """
    if not multigraph:
        return edge_weight(edges_data, weight_attr), (u, v)

    min_weight: Optional[Weight] = None
    min_key: Any = None
    for key, attrs in edges_data.items():
        weight = edge_weight(attrs, weight_attr)
        if min_weight is None or weight < min_weight:
            min_weight = weight
            min_key = key
    if min_weight is None:
        raise ValueError(f"No edges from '{u}' to '{v}'.")
    return min_weight, (u, v, min_key)


def iter_out_edges(
    graph: Any, node: NodeID, weight_attr: str
) -> Iterator[Tuple[NodeID, Weight, EdgeRef]]:
    """Yield ``(neighbor, weight, edge_ref)`` for the cheapest arc to each successor."""
    multigraph = graph.is_multigraph()
    adjacency = graph.succ if graph.is_directed() else graph.adj
    for neighbor, edges_data in adjacency[node].items():
        if multigraph and not edges_data:
            continue
        weight, edge = select_min_weight_edge(
            node, neighbor, edges_data, weight_attr, multigraph
        )
        yield neighbor, weight, edge


def iter_in_edges(
    graph: Any, node: NodeID, weight_attr: str
) -> Iterator[Tuple[NodeID, Weight, EdgeRef]]:
    """Yield ``(neighbor, weight, edge_ref)`` for the cheapest arc from each predecessor.

    The edge reference is oriented ``neighbor -> node``.
    """
    multigraph = graph.is_multigraph()
    adjacency = graph.pred if graph.is_directed() else graph.adj
    for neighbor, edges_data in adjacency[node].items():
        if multigraph and not edges_data:
            continue
        weight, edge = select_min_weight_edge(
            neighbor, node, edges_data, weight_attr, multigraph
        )
        yield neighbor, weight, edge
