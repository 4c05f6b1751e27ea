"""Exception types raised by graphkit algorithms."""

from __future__ import annotations

from typing import List, Optional

from graphkit.types.base import Edge, Vertex


class GraphAlgorithmError(Exception):
    """Base class for all graphkit errors."""


class NegativeCycleDetected(GraphAlgorithmError, ValueError):
    """Raised by Bellman-Ford when a negative cycle is reachable from the source.

    Attributes:
        edge: An edge that could still be relaxed after ``n - 1`` passes.
    """

    def __init__(self, edge: Optional[Edge] = None) -> None:
        self.edge = edge
        msg = "The graph contains a negative weight cycle"
        if edge is not None:
            msg += f" (edge {edge[0]}->{edge[1]} still relaxes)"
        super().__init__(msg)


class CycleDetected(GraphAlgorithmError, ValueError):
    """Raised by Kahn's topological sort when the graph is not acyclic.

    Attributes:
        emitted: Vertices ordered before the sort stalled.
        total: Number of vertices in the graph.
    """

    def __init__(self, emitted: List[Vertex], total: int) -> None:
        self.emitted = emitted
        self.total = total
        super().__init__(
            f"The graph contains a cycle: ordered {len(emitted)} of {total} vertices"
        )


__all__ = [
    "GraphAlgorithmError",
    "NegativeCycleDetected",
    "CycleDetected",
]
