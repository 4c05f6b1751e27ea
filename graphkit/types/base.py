"""Base aliases, constants and enums shared by the graph algorithms."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Callable, List, Sequence, Tuple

#: Vertices are dense integer indices ``0..n-1``.
Vertex = int

#: Edge weights are signed integers (negative only where an algorithm allows it).
Weight = int

#: Directed weighted edge ``(source, destination, weight)``.
Edge = Tuple[Vertex, Vertex, Weight]

#: Ordered sequence of edges; Bellman-Ford and Kruskal consume this form.
EdgeList = Sequence[Edge]

#: ``n x n`` grid; 0/1 presence flags or weights with ``INF`` meaning "no edge".
AdjacencyMatrix = Sequence[Sequence[int]]

#: Vertex index -> ordered neighbor indices.
AdjacencyList = Sequence[Sequence[Vertex]]

#: Vertex index -> ordered ``(neighbor, weight)`` pairs.
WeightedAdjacencyList = Sequence[Sequence[Tuple[Vertex, Weight]]]

#: Distance array indexed by vertex; ``INF`` marks unreached vertices.
Distances = List[int]

#: Caller-supplied callback invoked once per visited vertex.
VisitFunc = Callable[[Vertex], None]

#: "Infinity" sentinel: the largest native machine integer.
INF: int = sys.maxsize

#: Marks the absent traversal-parent of a start vertex.
NO_PARENT: Vertex = -1


class Traversal(IntEnum):
    """Traversal strategy for algorithms that offer both flavours."""

    BFS = 1
    DFS = 2

    @classmethod
    def from_string(cls, value: str) -> "Traversal":
        """Parse a string into a Traversal enum value.

        Args:
            value: Case-insensitive string name (e.g., "bfs", "DFS").

        Returns:
            The corresponding Traversal enum member.

        Raises:
            ValueError: If the string doesn't match any enum member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid traversal '{value}'. Valid values are: {valid}"
            ) from None
