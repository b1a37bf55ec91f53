"""Bidirectional Dijkstra search.

Runs a forward search from the source and a backward search from the target,
always advancing the side whose frontier is closer. The search stops once
the two frontier minima together cannot beat the best connection seen so far.
"""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Dict, List, Optional, Tuple

from pathmatrix.algorithms.base import ShortestPathAlgorithm
from pathmatrix.algorithms.edge_select import iter_in_edges, iter_out_edges
from pathmatrix.algorithms.path_utils import PredMap, join_at
from pathmatrix.logging import get_logger
from pathmatrix.paths.path import GraphPath
from pathmatrix.types import INFINITE_WEIGHT, NodeID, Weight

logger = get_logger(__name__)

_FORWARD = 0
_BACKWARD = 1


class BidirectionalDijkstraShortestPath(ShortestPathAlgorithm):
    """Default single-pair strategy.

    Works on directed and undirected networkx graphs, simple or multi. Among
    parallel edges only the cheapest is used. All search state lives in local
    variables, so one instance may serve concurrent callers.
    """

    name = "bidirectional"

    def get_path(self, source: NodeID, target: NodeID) -> Optional[GraphPath]:
        self._check_vertices(source, target)
        if source == target:
            return GraphPath.trivial(source)

        tie_breaker = count()
        dists: Tuple[Dict[NodeID, Weight], Dict[NodeID, Weight]] = (
            {source: 0},
            {target: 0},
        )
        trees: Tuple[PredMap, PredMap] = ({source: None}, {target: None})
        heaps: Tuple[List[Tuple[Weight, int, NodeID]], ...] = (
            [(0, next(tie_breaker), source)],
            [(0, next(tie_breaker), target)],
        )
        expanders = (iter_out_edges, iter_in_edges)

        best: Weight = INFINITE_WEIGHT
        meeting_node: Optional[NodeID] = None

        while heaps[_FORWARD] and heaps[_BACKWARD]:
            fwd_min = heaps[_FORWARD][0][0]
            bwd_min = heaps[_BACKWARD][0][0]
            if fwd_min + bwd_min >= best:
                break

            side = _FORWARD if fwd_min <= bwd_min else _BACKWARD
            dist, other_dist = dists[side], dists[1 - side]
            tree, heap = trees[side], heaps[side]

            current_cost, _, node_id = heappop(heap)
            if current_cost > dist[node_id]:
                continue

            for neighbor_id, edge_cost, edge in expanders[side](
                self.graph, node_id, self.weight_attr
            ):
                new_cost = current_cost + edge_cost
                if neighbor_id in dist and new_cost >= dist[neighbor_id]:
                    continue
                dist[neighbor_id] = new_cost
                tree[neighbor_id] = (node_id, edge)
                heappush(heap, (new_cost, next(tie_breaker), neighbor_id))

                if neighbor_id in other_dist:
                    total = new_cost + other_dist[neighbor_id]
                    if total < best:
                        best = total
                        meeting_node = neighbor_id

        if meeting_node is None:
            return None

        logger.debug(
            "Bidirectional search %r -> %r met at %r (weight=%s, settled fwd=%d bwd=%d)",
            source,
            target,
            meeting_node,
            best,
            len(dists[_FORWARD]),
            len(dists[_BACKWARD]),
        )
        return join_at(meeting_node, trees[_FORWARD], trees[_BACKWARD], best)
