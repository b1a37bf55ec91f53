"""Shared type aliases and small value types."""

from __future__ import annotations

import math
from typing import Hashable, NamedTuple, Tuple, Union

#: Vertex identity supplied by the graph.
NodeID = Hashable

#: Edge reference: ``(u, v, key)`` on multigraphs, ``(u, v)`` on simple graphs.
EdgeRef = Union[Tuple[Hashable, Hashable, Hashable], Tuple[Hashable, Hashable]]

#: Numeric path or edge weight.
Weight = Union[int, float]

#: Weight reported for a pair with no connecting path.
INFINITE_WEIGHT: float = math.inf


class SourceTargetPair(NamedTuple):
    """Ordered ``(source, target)`` cache key.

    Equality and hashing cover both members, so ``(a, b)`` and ``(b, a)`` are
    distinct keys unless ``a == b``.
    """

    source: NodeID
    target: NodeID
