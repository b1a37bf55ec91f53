"""Shortest-path-first (SPF) search.

Dijkstra search from a single source with an optional destination. When the
destination is known the search stops as soon as it is settled, so a
single-pair lookup only explores nodes closer than the destination.
"""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Dict, List, Optional, Tuple

from pathmatrix.algorithms.base import Graph, ShortestPathAlgorithm
from pathmatrix.algorithms.edge_select import iter_out_edges
from pathmatrix.algorithms.path_utils import PredMap, resolve_to_path
from pathmatrix.paths.path import GraphPath
from pathmatrix.types import NodeID, Weight


def spf(
    graph: Graph,
    src_node: NodeID,
    weight_attr: str = "weight",
    dst_node: Optional[NodeID] = None,
) -> Tuple[Dict[NodeID, Weight], PredMap]:
    """Compute shortest paths from a source node.

    Among parallel edges only the cheapest is considered. Ties between equal
    cost routes keep the first one found.

    Args:
        graph: Any networkx graph.
        src_node: The source node.
        weight_attr: Edge attribute holding the weight (missing means 1).
        dst_node: Optional destination node. If provided, the search stops
            once ``dst_node`` is popped at its minimal distance; costs of other
            nodes may then be tentative.

    Returns:
        tuple[dict[NodeID, Weight], dict[NodeID, Optional[tuple]]]:
            Costs and single-predecessor map. The source maps to None.

    Raises:
        KeyError: If src_node does not exist in graph.
        ValueError: If a negative edge weight is encountered.
    """
    if src_node not in graph:
        raise KeyError(f"Source node '{src_node}' is not in the graph.")

    costs: Dict[NodeID, Weight] = {src_node: 0}
    pred: PredMap = {src_node: None}
    tie_breaker = count()
    min_pq: List[Tuple[Weight, int, NodeID]] = [(0, next(tie_breaker), src_node)]

    while min_pq:
        current_cost, _, node_id = heappop(min_pq)
        if current_cost > costs[node_id]:
            continue
        if dst_node is not None and node_id == dst_node:
            break

        for neighbor_id, edge_cost, edge in iter_out_edges(graph, node_id, weight_attr):
            new_cost = current_cost + edge_cost
            if neighbor_id not in costs or new_cost < costs[neighbor_id]:
                costs[neighbor_id] = new_cost
                pred[neighbor_id] = (node_id, edge)
                heappush(min_pq, (new_cost, next(tie_breaker), neighbor_id))

    return costs, pred


class DijkstraShortestPath(ShortestPathAlgorithm):
    """One-directional Dijkstra with early exit at the target."""

    name = "dijkstra"

    def get_path(self, source: NodeID, target: NodeID) -> Optional[GraphPath]:
        self._check_vertices(source, target)
        if source == target:
            return GraphPath.trivial(source)

        costs, pred = spf(self.graph, source, self.weight_attr, dst_node=target)
        if target not in costs:
            return None
        return resolve_to_path(source, target, pred, costs[target])

    def get_paths(self, source: NodeID) -> Dict[NodeID, GraphPath]:
        """Return shortest paths from ``source`` to every reachable node.

        The source itself maps to its trivial path.
        """
        costs, pred = spf(self.graph, source, self.weight_attr)
        paths: Dict[NodeID, GraphPath] = {}
        for node, cost in costs.items():
            if node == source:
                paths[node] = GraphPath.trivial(source)
                continue
            path = resolve_to_path(source, node, pred, cost)
            if path is not None:
                paths[node] = path
        return paths
