"""Immutable result containers for algorithm outputs."""

from __future__ import annotations

from typing import List, NamedTuple, Tuple

from graphkit.types.base import Vertex, Weight


class SpanningTree(NamedTuple):
    """Minimum spanning tree (or forest) produced by Kruskal or Prim.

    Unpacks as ``edges, total_weight``.

    Attributes:
        edges: Accepted ``(parent, child)`` vertex pairs in acceptance order.
        total_weight: Sum of the weights of the accepted edges.
    """

    edges: List[Tuple[Vertex, Vertex]]
    total_weight: Weight

    @property
    def num_edges(self) -> int:
        return len(self.edges)
