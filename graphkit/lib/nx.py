"""NetworkX graph conversion utilities.

Converts NetworkX graphs into the read-only representations consumed by
graphkit algorithms: adjacency lists, adjacency matrices and edge lists over
dense integer vertex indices. The returned NodeMap translates indices back to
the original node names.

Example:
    >>> import networkx as nx
    >>> from graphkit.lib.nx import to_adjacency_list
    >>> from graphkit.algorithms import dijkstra
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=3)
    >>> G.add_edge("B", "C", weight=4)
    >>> adj, node_map = to_adjacency_list(G, weight_attr="weight")
    >>> dist = dijkstra(adj, node_map.to_index["A"])
    >>> dist[node_map.to_index["C"]]
    7
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import (
    TYPE_CHECKING,
    Any,
    Dict,
    Hashable,
    Iterable,
    List,
    Optional,
    Tuple,
    Union,
)

import numpy as np

from graphkit.config import ALGORITHM_CONFIG
from graphkit.types.base import Edge, Vertex

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and integer indices.

    Node names (any hashable) are mapped to contiguous indices starting at 0.

    Attributes:
        to_index: Maps original node names to integer indices
        to_name: Maps integer indices back to original node names

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.names([2, 0])
        ['C', 'A']
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from a list of node names in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def names(self, indices: Iterable[Vertex]) -> List[Hashable]:
        """Translate a sequence of vertex indices back to node names."""
        return [self.to_name[i] for i in indices]

    def __len__(self) -> int:
        """Return the number of nodes in the mapping."""
        return len(self.to_index)


def _prepare(G: NxGraph) -> Tuple[NodeMap, bool]:
    import networkx as nx

    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    if G.number_of_nodes() == 0:
        raise ValueError("Graph has no nodes")

    # Sorted for deterministic ordering
    node_map = NodeMap.from_names(sorted(G.nodes(), key=str))
    return node_map, G.is_directed()


def _indexed_edges(
    G: NxGraph,
    node_map: NodeMap,
    weight_attr: Optional[str],
    default_weight: int,
) -> Iterable[Edge]:
    # One item per edge, parallel edges of multigraphs included
    for u, v, data in G.edges(data=True):
        weight = default_weight
        if weight_attr is not None:
            weight = int(data.get(weight_attr, default_weight))
        yield node_map.to_index[u], node_map.to_index[v], weight


def to_adjacency_list(
    G: NxGraph,
    weight_attr: Optional[str] = None,
    default_weight: int = 1,
) -> Tuple[List[List[Any]], NodeMap]:
    """Convert a NetworkX graph to an adjacency list.

    Undirected edges are listed from both ends (a self-loop once). Each
    neighbor list is ordered by neighbor index.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph).
        weight_attr: Edge attribute holding the integer weight. If None, the
            result is unweighted (neighbor indices only); otherwise entries are
            ``(neighbor, weight)`` pairs.
        default_weight: Weight used when the attribute is missing.

    Returns:
        ``(adj_list, node_map)``.

    Raises:
        TypeError: If G is not a NetworkX graph.
        ValueError: If G has no nodes.
    """
    node_map, directed = _prepare(G)
    adj: List[List[Any]] = [[] for _ in range(len(node_map))]

    for u, v, weight in _indexed_edges(G, node_map, weight_attr, default_weight):
        if weight_attr is None:
            adj[u].append(v)
            if not directed and u != v:
                adj[v].append(u)
        else:
            adj[u].append((v, weight))
            if not directed and u != v:
                adj[v].append((u, weight))

    for neighbors in adj:
        if weight_attr is None:
            neighbors.sort()
        else:
            neighbors.sort(key=lambda entry: entry[0])
    return adj, node_map


def to_adjacency_matrix(
    G: NxGraph,
    weight_attr: Optional[str] = None,
    default_weight: int = 1,
    inf: Optional[int] = None,
) -> Tuple[np.ndarray, NodeMap]:
    """Convert a NetworkX graph to a square int64 adjacency matrix.

    Without ``weight_attr`` the matrix holds 0/1 presence flags. With it, the
    matrix holds edge weights, the sentinel where there is no edge and 0 on
    the diagonal; parallel edges keep their minimum weight.

    Args:
        G: NetworkX graph.
        weight_attr: Edge attribute holding the integer weight.
        default_weight: Weight used when the attribute is missing.
        inf: Sentinel for missing edges (default: configured infinity).

    Returns:
        ``(matrix, node_map)``.

    Raises:
        TypeError: If G is not a NetworkX graph.
        ValueError: If G has no nodes.
    """
    node_map, directed = _prepare(G)
    n = len(node_map)

    if weight_attr is None:
        matrix = np.zeros((n, n), dtype=np.int64)
        for u, v, _ in _indexed_edges(G, node_map, None, default_weight):
            matrix[u, v] = 1
            if not directed:
                matrix[v, u] = 1
        return matrix, node_map

    inf = ALGORITHM_CONFIG.resolve_inf(inf)
    matrix = np.full((n, n), inf, dtype=np.int64)
    np.fill_diagonal(matrix, 0)
    for u, v, weight in _indexed_edges(G, node_map, weight_attr, default_weight):
        matrix[u, v] = min(int(matrix[u, v]), weight)
        if not directed:
            matrix[v, u] = min(int(matrix[v, u]), weight)
    return matrix, node_map


def to_edge_list(
    G: NxGraph,
    weight_attr: str = "weight",
    default_weight: int = 1,
) -> Tuple[List[Edge], NodeMap]:
    """Convert a NetworkX graph to a ``(source, destination, weight)`` edge list.

    Undirected edges produce one triple per direction, so a negative undirected
    edge is itself a negative cycle for Bellman-Ford.

    Raises:
        TypeError: If G is not a NetworkX graph.
        ValueError: If G has no nodes.
    """
    node_map, directed = _prepare(G)
    edges: List[Edge] = []
    for u, v, weight in _indexed_edges(G, node_map, weight_attr, default_weight):
        edges.append((u, v, weight))
        if not directed and u != v:
            edges.append((v, u, weight))
    return edges, node_map
