"""Topological ordering of directed acyclic graphs.

Two strategies over unweighted adjacency lists (vertex -> successors):
  - ``dfs_order``: reverse DFS post-order. Assumes the input is acyclic; on a
    cyclic graph the result is meaningless and no error is raised.
  - ``kahn_order``: repeatedly removes zero in-degree vertices. Detects cycles
    and raises ``CycleDetected``.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional

from graphkit.exceptions import CycleDetected
from graphkit.logging import get_logger
from graphkit.types.base import AdjacencyList, Vertex, VisitFunc

logger = get_logger(__name__)


def dfs_order(
    adj_list: AdjacencyList, visit: Optional[VisitFunc] = None
) -> List[Vertex]:
    """Topological order from depth-first search.

    Every vertex is pushed onto a stack once all its descendants have been
    pushed; unvisited vertices are explored in index order. The order is the
    stack read top to bottom.

    Args:
        adj_list: Vertex index -> successor indices. Must be acyclic.
        visit: Optional callback invoked for each vertex in the final order.

    Returns:
        Vertices in topological order.
    """
    size = len(adj_list)
    visited = [False] * size
    finished: List[Vertex] = []

    for root in range(size):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adj_list[root]))]
        while stack:
            node, successors = stack[-1]
            for successor in successors:
                if not visited[successor]:
                    visited[successor] = True
                    stack.append((successor, iter(adj_list[successor])))
                    break
            else:
                stack.pop()
                finished.append(node)

    order = finished[::-1]
    if visit is not None:
        for node in order:
            visit(node)
    return order


def kahn_order(adj_list: AdjacencyList) -> List[Vertex]:
    """Topological order via Kahn's algorithm.

    Zero in-degree vertices seed a FIFO queue in index order. Each dequeued
    vertex is emitted and its successors' in-degrees decremented; those that
    reach zero are enqueued.

    Args:
        adj_list: Vertex index -> successor indices.

    Returns:
        Vertices in topological order.

    Raises:
        CycleDetected: If fewer than all vertices could be ordered.
    """
    size = len(adj_list)
    in_degree = [0] * size
    for successors in adj_list:
        for successor in successors:
            in_degree[successor] += 1

    queue: Deque[Vertex] = deque(v for v in range(size) if in_degree[v] == 0)
    order: List[Vertex] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for successor in adj_list[node]:
            in_degree[successor] -= 1
            if in_degree[successor] == 0:
                queue.append(successor)

    if len(order) != size:
        logger.debug("Kahn: ordered %d of %d vertices, cycle present", len(order), size)
        raise CycleDetected(order, size)
    return order
