"""Union-find (disjoint set) with path compression and union by rank.

Besides the structure itself, provides connectivity helpers that partition a
graph's vertices into connected components.

Indices outside ``0..n-1`` are not checked; behaviour for them is undefined.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from graphkit.types.base import AdjacencyList, Vertex


class DisjointSet:
    """Partition of ``0..n-1`` into disjoint sets.

    Example:
        >>> ds = DisjointSet(4)
        >>> ds.union(0, 1)
        True
        >>> ds.same(0, 1), ds.same(0, 2)
        (True, False)
        >>> ds.components
        3
    """

    __slots__ = ("parent", "rank", "_components")

    def __init__(self, n: int) -> None:
        self.parent: List[int] = list(range(n))
        self.rank: List[int] = [0] * n
        self._components = n

    def __len__(self) -> int:
        return len(self.parent)

    @property
    def components(self) -> int:
        """Number of disjoint sets currently tracked."""
        return self._components

    def find(self, x: Vertex) -> Vertex:
        """Return the root of ``x``'s set, redirecting the walked path to it."""
        parent = self.parent
        root = x
        while parent[root] != root:
            root = parent[root]
        # Path compression: point every node on the walk straight at the root
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, u: Vertex, v: Vertex) -> bool:
        """Merge the sets containing ``u`` and ``v``.

        The lower-rank root is attached under the higher-rank root. On equal
        rank, ``v``'s root goes under ``u``'s root and the latter's rank grows
        by one.

        Returns:
            True if two different sets were merged, False if already joined.
        """
        root_u = self.find(u)
        root_v = self.find(v)
        if root_u == root_v:
            return False

        rank = self.rank
        if rank[root_u] < rank[root_v]:
            self.parent[root_u] = root_v
        elif rank[root_u] > rank[root_v]:
            self.parent[root_v] = root_u
        else:
            self.parent[root_v] = root_u
            rank[root_u] += 1
        self._components -= 1
        return True

    def same(self, u: Vertex, v: Vertex) -> bool:
        """Return True if ``u`` and ``v`` belong to the same set."""
        return self.find(u) == self.find(v)

    def groups(self) -> List[List[Vertex]]:
        """Return the current sets, each sorted, ordered by smallest member."""
        by_root: Dict[Vertex, List[Vertex]] = {}
        for x in range(len(self.parent)):
            by_root.setdefault(self.find(x), []).append(x)
        return list(by_root.values())


def connected_components(adj_list: AdjacencyList) -> List[List[Vertex]]:
    """Partition the vertices of an undirected graph into connected components.

    Directed inputs are treated as undirected (edge direction is ignored).

    Args:
        adj_list: Vertex index -> neighbor indices.

    Returns:
        Components as sorted vertex lists, ordered by their smallest vertex.
    """
    ds = DisjointSet(len(adj_list))
    for u, neighbors in enumerate(adj_list):
        for v in neighbors:
            ds.union(u, v)
    return ds.groups()


def count_components(n: int, edges: Iterable[tuple]) -> int:
    """Count connected components among ``n`` vertices joined by ``edges``.

    Only the first two items of each edge are read, so both ``(u, v)`` pairs
    and ``(u, v, weight)`` triples are accepted.
    """
    ds = DisjointSet(n)
    for edge in edges:
        ds.union(edge[0], edge[1])
    return ds.components
