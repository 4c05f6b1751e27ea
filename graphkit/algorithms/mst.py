"""Minimum spanning trees: Kruskal and Prim.

Both algorithms consume weighted adjacency lists (vertex -> ``(neighbor,
weight)`` pairs). For undirected graphs each edge is normally listed from both
ends; Kruskal simply rejects the second copy because its endpoints are already
joined.

Disconnected input is not an error:
  - Kruskal returns a minimum spanning forest (one tree per component).
  - Prim returns the tree of the component containing ``start`` only.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import List, Tuple

from graphkit.algorithms.disjoint_set import DisjointSet
from graphkit.logging import get_logger
from graphkit.types.base import NO_PARENT, Edge, Vertex, WeightedAdjacencyList
from graphkit.types.dto import SpanningTree

logger = get_logger(__name__)


def sorted_edges(adj_list: WeightedAdjacencyList) -> List[Edge]:
    """Flatten an adjacency list into ``(u, v, weight)`` edges sorted by weight.

    The sort is stable, so equal-weight edges keep their encounter order
    (vertex index, then position in the neighbor list).
    """
    edges = [
        (u, v, weight)
        for u, neighbors in enumerate(adj_list)
        for v, weight in neighbors
    ]
    edges.sort(key=lambda edge: edge[2])
    return edges


def kruskal(adj_list: WeightedAdjacencyList) -> SpanningTree:
    """Kruskal's minimum spanning tree (forest on disconnected input).

    Edges are scanned in ascending weight order; an edge is accepted iff its
    endpoints are in different components, which are then merged.

    Args:
        adj_list: Vertex index -> ``(neighbor, weight)`` pairs.

    Returns:
        SpanningTree with accepted ``(u, v)`` edges in acceptance order and
        their total weight. A connected ``n``-vertex graph yields ``n - 1``
        edges; ``c`` components yield ``n - c``.
    """
    ds = DisjointSet(len(adj_list))
    mst_edges: List[Tuple[Vertex, Vertex]] = []
    total_weight = 0

    for u, v, weight in sorted_edges(adj_list):
        if ds.union(u, v):
            mst_edges.append((u, v))
            total_weight += weight

    if ds.components > 1:
        logger.debug(
            "Kruskal: graph has %d components, returning a spanning forest",
            ds.components,
        )
    return SpanningTree(mst_edges, total_weight)


def prim(adj_list: WeightedAdjacencyList, start: Vertex = 0) -> SpanningTree:
    """Prim's minimum spanning tree grown from ``start``.

    A min-priority queue holds ``(weight, parent, candidate)`` entries and is
    seeded with ``(0, NO_PARENT, start)``. Popped candidates that are already
    in the tree are discarded; otherwise the candidate is absorbed, its edge
    recorded (except for the seed) and its edges to vertices outside the tree
    enqueued. Runs until the queue is empty.

    Args:
        adj_list: Vertex index -> ``(neighbor, weight)`` pairs.
        start: Vertex the tree is grown from.

    Returns:
        SpanningTree with ``(parent, child)`` edges in absorption order and
        their total weight. Only ``start``'s component is covered.
    """
    absorbed = [False] * len(adj_list)
    mst_edges: List[Tuple[Vertex, Vertex]] = []
    total_weight = 0
    min_pq: List[Tuple[int, Vertex, Vertex]] = [(0, NO_PARENT, start)]

    while min_pq:
        weight, parent, node = heappop(min_pq)
        if absorbed[node]:
            continue
        absorbed[node] = True
        if parent != NO_PARENT:
            mst_edges.append((parent, node))
        total_weight += weight

        for neighbor, edge_weight in adj_list[node]:
            if not absorbed[neighbor]:
                heappush(min_pq, (edge_weight, node, neighbor))

    covered = len(mst_edges) + 1
    if covered < len(adj_list):
        logger.debug(
            "Prim from %d covered %d of %d vertices", start, covered, len(adj_list)
        )
    return SpanningTree(mst_edges, total_weight)
