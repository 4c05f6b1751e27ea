"""graphkit: graph algorithms over plain Python graph representations.

Algorithms take read-only adjacency lists, adjacency matrices or edge lists
over dense integer vertices ``0..n-1`` and return fresh results; nothing is
mutated and no state is kept between calls.

Primary API:
    bfs(), dfs() - Whole-graph traversal over 0/1 adjacency matrices
    is_cyclic_undirected() - Back-edge cycle detection (BFS or DFS)
    dijkstra(), bellman_ford(), floyd_warshall() - Shortest paths
    kruskal(), prim() - Minimum spanning trees / forests
    dfs_order(), kahn_order() - Topological ordering
    DisjointSet - Union-find with path compression and union by rank
    to_adjacency_list() etc. - Conversion from NetworkX graphs

Example:
    from graphkit import dijkstra, kruskal

    adj = [[(1, 4), (2, 1)], [(0, 4), (2, 2)], [(0, 1), (1, 2)]]
    dist = dijkstra(adj, 0)          # [0, 3, 1]
    edges, total = kruskal(adj)      # [(0, 2), (1, 2)], 3
"""

from __future__ import annotations

from graphkit import logging
from graphkit._version import __version__
from graphkit.algorithms import (
    DisjointSet,
    bellman_ford,
    bfs,
    connected_components,
    count_components,
    dfs,
    dfs_order,
    dijkstra,
    dijkstra_with_predecessors,
    floyd_warshall,
    has_negative_cycle,
    is_cyclic_undirected,
    is_cyclic_undirected_bfs,
    is_cyclic_undirected_dfs,
    kahn_order,
    kruskal,
    prim,
    resolve_path,
)
from graphkit.config import ALGORITHM_CONFIG, AlgorithmConfig
from graphkit.exceptions import (
    CycleDetected,
    GraphAlgorithmError,
    NegativeCycleDetected,
)
from graphkit.lib.nx import (
    NodeMap,
    to_adjacency_list,
    to_adjacency_matrix,
    to_edge_list,
)
from graphkit.types.base import INF, Traversal
from graphkit.types.dto import SpanningTree

__all__ = [
    # Version
    "__version__",
    # Traversal
    "bfs",
    "dfs",
    "is_cyclic_undirected",
    "is_cyclic_undirected_bfs",
    "is_cyclic_undirected_dfs",
    # Shortest paths
    "dijkstra",
    "dijkstra_with_predecessors",
    "resolve_path",
    "bellman_ford",
    "floyd_warshall",
    "has_negative_cycle",
    # Spanning trees
    "kruskal",
    "prim",
    "SpanningTree",
    # Topological order
    "dfs_order",
    "kahn_order",
    # Connectivity
    "DisjointSet",
    "connected_components",
    "count_components",
    # Types and configuration
    "INF",
    "Traversal",
    "AlgorithmConfig",
    "ALGORITHM_CONFIG",
    # Errors
    "GraphAlgorithmError",
    "NegativeCycleDetected",
    "CycleDetected",
    # Library integrations (NetworkX)
    "NodeMap",
    "to_adjacency_list",
    "to_adjacency_matrix",
    "to_edge_list",
    # Utilities
    "logging",
]
