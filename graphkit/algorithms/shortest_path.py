"""Shortest-path algorithms over integer-weighted graphs.

Provides:
  - Dijkstra (label-setting, non-negative weights) over weighted adjacency lists.
  - Bellman-Ford (label-correcting, negative weights allowed) over edge lists,
    with negative-cycle detection.
  - Floyd-Warshall (all pairs) over weighted adjacency matrices.

Notes:
    Unreached vertices and missing matrix edges are marked with the ``INF``
    sentinel (``ALGORITHM_CONFIG.infinity`` unless ``inf=`` is given). No
    arithmetic ever combines a sentinel with a weight: relaxations through an
    unreached vertex are skipped rather than computed. The sentinel is compared
    by equality only, so any value works (e.g. ``-1``) as long as it never
    equals a real distance.

    Dijkstra does not detect negative weights; with them it silently returns
    wrong distances. Check weights beforehand or use Bellman-Ford.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Dict, List, Optional, Sequence, Tuple

from graphkit.config import ALGORITHM_CONFIG
from graphkit.exceptions import NegativeCycleDetected
from graphkit.logging import get_logger
from graphkit.types.base import (
    AdjacencyMatrix,
    Distances,
    EdgeList,
    Vertex,
    WeightedAdjacencyList,
)

logger = get_logger(__name__)


def _dijkstra(
    adj_list: WeightedAdjacencyList,
    start: Vertex,
    inf: int,
    pred: Optional[Dict[Vertex, Vertex]],
) -> Distances:
    distances: Distances = [inf] * len(adj_list)
    distances[start] = 0
    min_pq: List[Tuple[int, Vertex]] = [(0, start)]

    while min_pq:
        current_dist, node = heappop(min_pq)
        # Stale entry: a shorter distance was pushed after this one
        if current_dist > distances[node]:
            continue

        for neighbor, weight in adj_list[node]:
            new_dist = current_dist + weight
            if distances[neighbor] == inf or new_dist < distances[neighbor]:
                distances[neighbor] = new_dist
                if pred is not None:
                    pred[neighbor] = node
                heappush(min_pq, (new_dist, neighbor))

    return distances


def dijkstra(
    adj_list: WeightedAdjacencyList,
    start: Vertex,
    *,
    inf: Optional[int] = None,
) -> Distances:
    """Single-source shortest distances for non-negative weights.

    A min-priority queue keyed by tentative distance is seeded with
    ``(0, start)``. Entries whose key exceeds the vertex's current best distance
    are discarded on pop (lazy deletion in place of decrease-key).

    Args:
        adj_list: Vertex index -> ``(neighbor, weight)`` pairs; weights >= 0.
        start: Source vertex.
        inf: Sentinel for unreached vertices (default: configured infinity).

    Returns:
        Distance array of length ``len(adj_list)``; ``0`` at ``start`` and the
        sentinel for vertices not reachable from it.
    """
    inf = ALGORITHM_CONFIG.resolve_inf(inf)
    return _dijkstra(adj_list, start, inf, None)


def dijkstra_with_predecessors(
    adj_list: WeightedAdjacencyList,
    start: Vertex,
    *,
    inf: Optional[int] = None,
) -> Tuple[Distances, Dict[Vertex, Vertex]]:
    """Like :func:`dijkstra`, also returning the shortest-path tree.

    Returns:
        ``(distances, pred)`` where ``pred`` maps each reached vertex other
        than ``start`` to its predecessor on one shortest path.
    """
    inf = ALGORITHM_CONFIG.resolve_inf(inf)
    pred: Dict[Vertex, Vertex] = {}
    distances = _dijkstra(adj_list, start, inf, pred)
    return distances, pred


def resolve_path(
    pred: Dict[Vertex, Vertex], start: Vertex, dst: Vertex
) -> Optional[List[Vertex]]:
    """Rebuild the vertex path ``start -> ... -> dst`` from a predecessor map.

    Returns:
        The path as a list of vertices, or None if ``dst`` was not reached.
    """
    if dst == start:
        return [start]
    if dst not in pred:
        return None
    path = [dst]
    node = dst
    while node != start:
        node = pred[node]
        path.append(node)
    path.reverse()
    return path


def bellman_ford(
    edges: EdgeList,
    n: int,
    source: Vertex = 0,
    *,
    inf: Optional[int] = None,
) -> Distances:
    """Single-source shortest distances allowing negative edge weights.

    All edges are relaxed in up to ``n - 1`` passes; edges leaving a vertex
    that is still at the sentinel are skipped. One further pass then checks
    whether any edge still relaxes, which means a negative cycle is reachable
    from the source.

    Args:
        edges: ``(source, destination, weight)`` triples over vertices ``0..n-1``.
        n: Number of vertices; an empty graph yields an empty array.
        source: Source vertex (vertex 0 unless given).
        inf: Sentinel for unreached vertices (default: configured infinity).

    Returns:
        Distance array of length ``n``.

    Raises:
        NegativeCycleDetected: If a negative-weight cycle is reachable from
            ``source``.
    """
    inf = ALGORITHM_CONFIG.resolve_inf(inf)
    if n == 0:
        return []
    distances: Distances = [inf] * n
    distances[source] = 0

    passes = 0
    for _ in range(n - 1):
        passes += 1
        changed = False
        for u, v, weight in edges:
            if distances[u] == inf:
                continue
            new_dist = distances[u] + weight
            if distances[v] == inf or new_dist < distances[v]:
                distances[v] = new_dist
                changed = True
        if not changed and ALGORITHM_CONFIG.bellman_ford_early_exit:
            break

    for edge in edges:
        u, v, weight = edge
        if distances[u] == inf:
            continue
        if distances[v] == inf or distances[u] + weight < distances[v]:
            logger.debug(
                "Bellman-Ford: edge %d->%d still relaxes after %d passes",
                u,
                v,
                passes,
            )
            raise NegativeCycleDetected(tuple(edge))

    logger.debug("Bellman-Ford converged after %d of %d passes", passes, n - 1)
    return distances


def floyd_warshall(
    matrix: AdjacencyMatrix, *, inf: Optional[int] = None
) -> List[List[int]]:
    """All-pairs shortest distances.

    For every intermediate vertex ``k`` and every pair ``(i, j)``:
    ``cost[i][j] = min(cost[i][j], cost[i][k] + cost[k][j])``, skipped when
    either term is the sentinel. The input is not modified.

    A negative cycle is not raised as an error; it shows up as a negative
    value on the diagonal of the result (see :func:`has_negative_cycle`).

    Args:
        matrix: ``n x n`` weights; the sentinel marks a missing edge. The
            diagonal is normally 0.
        inf: Sentinel for missing edges (default: configured infinity).

    Returns:
        A new ``n x n`` list-of-lists of shortest distances.
    """
    inf = ALGORITHM_CONFIG.resolve_inf(inf)
    cost = [[int(value) for value in row] for row in matrix]
    size = len(cost)

    for k in range(size):
        cost_k = cost[k]
        for i in range(size):
            cost_ik = cost[i][k]
            if cost_ik == inf:
                continue
            cost_i = cost[i]
            for j in range(size):
                cost_kj = cost_k[j]
                if cost_kj == inf:
                    continue
                through_k = cost_ik + cost_kj
                if cost_i[j] == inf or through_k < cost_i[j]:
                    cost_i[j] = through_k

    return cost


def has_negative_cycle(dist_matrix: Sequence[Sequence[int]]) -> bool:
    """Return True if a Floyd-Warshall result has a negative diagonal entry."""
    return any(dist_matrix[i][i] < 0 for i in range(len(dist_matrix)))
