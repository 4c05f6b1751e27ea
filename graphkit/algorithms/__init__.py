"""Graph algorithms over caller-supplied, read-only graph representations."""

from graphkit.algorithms.disjoint_set import (
    DisjointSet,
    connected_components,
    count_components,
)
from graphkit.algorithms.mst import kruskal, prim, sorted_edges
from graphkit.algorithms.shortest_path import (
    bellman_ford,
    dijkstra,
    dijkstra_with_predecessors,
    floyd_warshall,
    has_negative_cycle,
    resolve_path,
)
from graphkit.algorithms.topological import dfs_order, kahn_order
from graphkit.algorithms.traversal import (
    bfs,
    dfs,
    is_cyclic_undirected,
    is_cyclic_undirected_bfs,
    is_cyclic_undirected_dfs,
)

__all__ = [
    # Connectivity
    "DisjointSet",
    "connected_components",
    "count_components",
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
    "sorted_edges",
    # Topological order
    "dfs_order",
    "kahn_order",
]
