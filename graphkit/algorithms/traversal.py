"""Breadth- and depth-first traversal, plus undirected cycle detection.

Traversals work over 0/1 adjacency matrices, where ``matrix[u][v] == 1`` marks
an edge ``u -> v``. Both cover the whole graph: after the pass from ``start``,
further passes are launched from every still-unvisited vertex in increasing
index order, so every vertex is reported exactly once.

Cycle detection works over undirected adjacency lists (each edge listed from
both ends) and tracks the traversal-parent of each vertex. Reaching an already
visited vertex that is not the current vertex's parent is a back-edge, which
means a cycle. The BFS and DFS variants agree on every input.

All depth-first routines use an explicit stack and reproduce the visitation
order of the textbook recursive formulation.
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, List, Optional, Tuple

from graphkit.logging import get_logger
from graphkit.types.base import (
    NO_PARENT,
    AdjacencyList,
    AdjacencyMatrix,
    Traversal,
    Vertex,
    VisitFunc,
)

logger = get_logger(__name__)


def bfs(
    matrix: AdjacencyMatrix,
    n: int,
    start: Vertex,
    visit: Optional[VisitFunc] = None,
) -> List[Vertex]:
    """Breadth-first traversal covering every vertex of the graph.

    Within one pass, vertices are reported in non-decreasing hop distance from
    the pass's source; neighbors are scanned in increasing index order.

    Args:
        matrix: ``n x n`` 0/1 adjacency matrix.
        n: Number of vertices.
        start: Vertex the first pass starts from.
        visit: Optional callback invoked once per vertex at first visitation.

    Returns:
        Vertices in visitation order (always all ``n`` of them).
    """
    visited = [False] * n
    order: List[Vertex] = []

    def _pass(source: Vertex) -> None:
        visited[source] = True
        order.append(source)
        if visit is not None:
            visit(source)
        queue: Deque[Vertex] = deque([source])
        while queue:
            node = queue.popleft()
            row = matrix[node]
            for neighbor in range(n):
                if row[neighbor] == 1 and not visited[neighbor]:
                    visited[neighbor] = True
                    queue.append(neighbor)
                    order.append(neighbor)
                    if visit is not None:
                        visit(neighbor)

    _pass(start)
    passes = 1
    for node in range(n):
        if not visited[node]:
            _pass(node)
            passes += 1

    logger.debug("BFS from %d visited %d vertices in %d pass(es)", start, n, passes)
    return order


def dfs(
    matrix: AdjacencyMatrix,
    n: int,
    start: Vertex,
    visit: Optional[VisitFunc] = None,
) -> List[Vertex]:
    """Pre-order depth-first traversal covering every vertex of the graph.

    Args:
        matrix: ``n x n`` 0/1 adjacency matrix.
        n: Number of vertices.
        start: Vertex the first pass starts from.
        visit: Optional callback invoked once per vertex, in pre-order.

    Returns:
        Vertices in visitation order (always all ``n`` of them).
    """
    visited = [False] * n
    order: List[Vertex] = []

    def _enter(node: Vertex) -> None:
        visited[node] = True
        order.append(node)
        if visit is not None:
            visit(node)

    def _pass(source: Vertex) -> None:
        _enter(source)
        # Each frame holds a vertex and the next neighbor index to scan
        stack: List[Tuple[Vertex, int]] = [(source, 0)]
        while stack:
            node, idx = stack[-1]
            row = matrix[node]
            while idx < n and (row[idx] != 1 or visited[idx]):
                idx += 1
            if idx == n:
                stack.pop()
                continue
            stack[-1] = (node, idx + 1)
            _enter(idx)
            stack.append((idx, 0))

    _pass(start)
    passes = 1
    for node in range(n):
        if not visited[node]:
            _pass(node)
            passes += 1

    logger.debug("DFS from %d visited %d vertices in %d pass(es)", start, n, passes)
    return order


def _cyclic_bfs_from(
    adj_list: AdjacencyList, start: Vertex, visited: List[bool]
) -> bool:
    visited[start] = True
    queue: Deque[Tuple[Vertex, Vertex]] = deque([(start, NO_PARENT)])
    while queue:
        node, parent = queue.popleft()
        for neighbor in adj_list[node]:
            if not visited[neighbor]:
                visited[neighbor] = True
                queue.append((neighbor, node))
            elif neighbor != parent:
                return True
    return False


def _cyclic_dfs_from(
    adj_list: AdjacencyList, start: Vertex, visited: List[bool]
) -> bool:
    visited[start] = True
    stack = [(start, NO_PARENT, iter(adj_list[start]))]
    while stack:
        node, parent, neighbors = stack[-1]
        for neighbor in neighbors:
            if not visited[neighbor]:
                visited[neighbor] = True
                stack.append((neighbor, node, iter(adj_list[neighbor])))
                break
            if neighbor != parent:
                return True
        else:
            stack.pop()
    return False


def _is_cyclic(
    adj_list: AdjacencyList,
    start: Optional[Vertex],
    search: Callable[[AdjacencyList, Vertex, List[bool]], bool],
) -> bool:
    visited = [False] * len(adj_list)
    if start is not None:
        return search(adj_list, start, visited)
    for node in range(len(adj_list)):
        if not visited[node] and search(adj_list, node, visited):
            return True
    return False


def is_cyclic_undirected_bfs(
    adj_list: AdjacencyList, start: Optional[Vertex] = 0
) -> bool:
    """Detect a cycle in an undirected graph with breadth-first search.

    Args:
        adj_list: Vertex index -> neighbor indices, each edge listed from both ends.
        start: Vertex to search from; only its component is examined.
            ``None`` examines every component in index order.

    Returns:
        True if a back-edge (and therefore a cycle) was found.
    """
    found = _is_cyclic(adj_list, start, _cyclic_bfs_from)
    logger.debug("BFS cycle check from %s: cyclic=%s", start, found)
    return found


def is_cyclic_undirected_dfs(
    adj_list: AdjacencyList, start: Optional[Vertex] = 0
) -> bool:
    """Detect a cycle in an undirected graph with depth-first search.

    Same contract as :func:`is_cyclic_undirected_bfs`.
    """
    found = _is_cyclic(adj_list, start, _cyclic_dfs_from)
    logger.debug("DFS cycle check from %s: cyclic=%s", start, found)
    return found


def is_cyclic_undirected(
    adj_list: AdjacencyList,
    start: Optional[Vertex] = 0,
    method: Traversal = Traversal.BFS,
) -> bool:
    """Detect a cycle in an undirected graph using the chosen traversal."""
    if method == Traversal.BFS:
        return is_cyclic_undirected_bfs(adj_list, start)
    elif method == Traversal.DFS:
        return is_cyclic_undirected_dfs(adj_list, start)
    raise ValueError(f"Unsupported traversal method: {method!r}")
