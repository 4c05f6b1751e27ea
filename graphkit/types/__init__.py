"""Shared typing constructs for graphkit.

Public type aliases, the ``INF`` sentinel and result containers used across the
algorithms. Contains no algorithmic logic.
"""

from graphkit.types.base import (
    INF,
    NO_PARENT,
    AdjacencyList,
    AdjacencyMatrix,
    Distances,
    Edge,
    EdgeList,
    Traversal,
    Vertex,
    VisitFunc,
    Weight,
    WeightedAdjacencyList,
)
from graphkit.types.dto import SpanningTree

__all__ = [
    # Enums
    "Traversal",
    # Type aliases and constants
    "INF",
    "NO_PARENT",
    "Vertex",
    "Weight",
    "Edge",
    "EdgeList",
    "AdjacencyList",
    "AdjacencyMatrix",
    "WeightedAdjacencyList",
    "Distances",
    "VisitFunc",
    # DTOs
    "SpanningTree",
]
