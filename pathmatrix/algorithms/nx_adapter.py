"""Strategy backed by networkx's own bidirectional Dijkstra."""

from __future__ import annotations

from typing import List, Optional

import networkx as nx

from pathmatrix.algorithms.base import ShortestPathAlgorithm
from pathmatrix.algorithms.edge_select import select_min_weight_edge
from pathmatrix.paths.path import GraphPath
from pathmatrix.types import EdgeRef, NodeID


class NetworkXShortestPath(ShortestPathAlgorithm):
    """Delegate single-pair search to ``networkx.bidirectional_dijkstra``.

    Missing vertices surface as ``networkx.NodeNotFound``; an unreachable
    target is reported as None.
    """

    name = "networkx"

    def get_path(self, source: NodeID, target: NodeID) -> Optional[GraphPath]:
        if source == target and source in self.graph:
            return GraphPath.trivial(source)
        try:
            length, nodes = nx.bidirectional_dijkstra(
                self.graph, source, target, weight=self.weight_attr
            )
        except nx.NetworkXNoPath:
            return None
        return GraphPath(
            nodes=tuple(nodes), edges=tuple(self._edges_along(nodes)), weight=length
        )

    def _edges_along(self, nodes: List[NodeID]) -> List[EdgeRef]:
        multigraph = self.graph.is_multigraph()
        adjacency = self.graph.succ if self.graph.is_directed() else self.graph.adj
        return [
            select_min_weight_edge(u, v, adjacency[u][v], self.weight_attr, multigraph)[1]
            for u, v in zip(nodes, nodes[1:])
        ]
