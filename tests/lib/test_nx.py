"""Tests for graphkit.lib.nx NetworkX conversion utilities."""

import networkx as nx
import numpy as np
import pytest

from graphkit.algorithms import (
    bellman_ford,
    bfs,
    dijkstra,
    floyd_warshall,
    kahn_order,
    kruskal,
)
from graphkit.lib.nx import (
    NodeMap,
    to_adjacency_list,
    to_adjacency_matrix,
    to_edge_list,
)
from graphkit.types.base import INF


class TestNodeMap:
    """Tests for NodeMap class."""

    def test_from_names_creates_bidirectional_mapping(self):
        """NodeMap.from_names creates correct to_index and to_name mappings."""
        node_map = NodeMap.from_names(["A", "B", "C"])

        assert node_map.to_index == {"A": 0, "B": 1, "C": 2}
        assert node_map.to_name == {0: "A", 1: "B", 2: "C"}

    def test_from_names_empty_list(self):
        """NodeMap.from_names handles empty list."""
        node_map = NodeMap.from_names([])
        assert len(node_map) == 0
        assert node_map.to_index == {}

    def test_names_translates_indices(self):
        """NodeMap.names maps an index sequence back to node names."""
        node_map = NodeMap.from_names(["X", "Y", "Z"])
        assert node_map.names([2, 0, 1]) == ["Z", "X", "Y"]

    def test_mixed_type_node_names(self):
        """NodeMap handles mixed type node names."""
        node_map = NodeMap.from_names(["A", 1, (0, 1)])
        assert len(node_map) == 3
        assert node_map.to_index[(0, 1)] == 2


class TestValidation:
    """Input checks shared by all converters."""

    @pytest.mark.parametrize(
        "convert", [to_adjacency_list, to_adjacency_matrix, to_edge_list]
    )
    def test_rejects_non_networkx_input(self, convert):
        with pytest.raises(TypeError, match="Expected NetworkX graph"):
            convert({"A": ["B"]})

    @pytest.mark.parametrize(
        "convert", [to_adjacency_list, to_adjacency_matrix, to_edge_list]
    )
    def test_rejects_empty_graph(self, convert):
        with pytest.raises(ValueError, match="no nodes"):
            convert(nx.DiGraph())

    def test_node_order_is_sorted_by_str(self):
        G = nx.DiGraph()
        G.add_edge("b", "a")
        G.add_node("c")
        _, node_map = to_adjacency_list(G)
        assert node_map.to_name == {0: "a", 1: "b", 2: "c"}


class TestAdjacencyList:
    def test_unweighted_digraph(self):
        G = nx.DiGraph()
        G.add_edges_from([("A", "C"), ("A", "B"), ("B", "C")])
        adj, node_map = to_adjacency_list(G)
        assert adj == [[1, 2], [2], []]
        assert node_map.names(kahn_order(adj)) == ["A", "B", "C"]

    def test_weighted_digraph_with_default(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", weight=3)
        G.add_edge("B", "C")
        adj, _ = to_adjacency_list(G, weight_attr="weight", default_weight=7)
        assert adj == [[(1, 3)], [(2, 7)], []]

    def test_undirected_lists_both_ends(self):
        G = nx.Graph()
        G.add_edge(0, 1, weight=2)
        G.add_edge(1, 2, weight=5)
        G.add_edge(2, 2, weight=1)
        adj, _ = to_adjacency_list(G, weight_attr="weight")
        assert adj == [[(1, 2)], [(0, 2), (2, 5)], [(1, 5), (2, 1)]]

    def test_multigraph_keeps_parallel_edges(self):
        G = nx.MultiDiGraph()
        G.add_edge("A", "B", cost=4)
        G.add_edge("A", "B", cost=1)
        adj, _ = to_adjacency_list(G, weight_attr="cost")
        assert sorted(adj[0]) == [(1, 1), (1, 4)]
        assert dijkstra(adj, 0) == [0, 1]

    def test_dijkstra_matches_networkx(self):
        G = nx.DiGraph()
        G.add_weighted_edges_from(
            [("s", "a", 2), ("s", "b", 6), ("a", "b", 3), ("b", "t", 1), ("a", "t", 9)]
        )
        adj, node_map = to_adjacency_list(G, weight_attr="weight")
        dist = dijkstra(adj, node_map.to_index["s"])
        expected = nx.single_source_dijkstra_path_length(G, "s")
        for name, d in expected.items():
            assert dist[node_map.to_index[name]] == d

    def test_kruskal_matches_networkx(self):
        G = nx.petersen_graph()
        for i, (u, v) in enumerate(sorted(G.edges())):
            G.edges[u, v]["weight"] = (i * 7) % 5 + 1
        adj, _ = to_adjacency_list(G, weight_attr="weight")
        edges, total = kruskal(adj)
        assert len(edges) == G.number_of_nodes() - 1
        assert total == nx.minimum_spanning_tree(G).size(weight="weight")


class TestAdjacencyMatrix:
    def test_unweighted_matrix(self):
        G = nx.Graph()
        G.add_edges_from([(0, 1), (1, 2)])
        G.add_node(3)
        matrix, _ = to_adjacency_matrix(G)
        assert matrix.dtype == np.int64
        assert matrix.tolist() == [
            [0, 1, 0, 0],
            [1, 0, 1, 0],
            [0, 1, 0, 0],
            [0, 0, 0, 0],
        ]
        assert bfs(matrix, 4, 0) == [0, 1, 2, 3]

    def test_weighted_matrix_uses_sentinel(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", weight=3)
        G.add_node("C")
        matrix, _ = to_adjacency_matrix(G, weight_attr="weight")
        assert matrix.tolist() == [[0, 3, INF], [INF, 0, INF], [INF, INF, 0]]

    def test_weighted_matrix_keeps_min_parallel_weight(self):
        G = nx.MultiGraph()
        G.add_edge(0, 1, weight=9)
        G.add_edge(0, 1, weight=4)
        matrix, _ = to_adjacency_matrix(G, weight_attr="weight")
        assert matrix.tolist() == [[0, 4], [4, 0]]

    def test_custom_sentinel(self):
        G = nx.DiGraph()
        G.add_nodes_from([0, 1])
        matrix, _ = to_adjacency_matrix(G, weight_attr="weight", inf=999)
        assert matrix.tolist() == [[0, 999], [999, 0]]

    def test_floyd_warshall_matches_networkx(self):
        G = nx.DiGraph()
        G.add_weighted_edges_from(
            [(0, 1, 3), (1, 2, 2), (2, 0, 5), (0, 3, 7), (3, 0, 2)]
        )
        matrix, _ = to_adjacency_matrix(G, weight_attr="weight")
        result = floyd_warshall(matrix)
        expected = dict(nx.floyd_warshall(G))
        for i in range(4):
            for j in range(4):
                assert result[i][j] == expected[i][j]


class TestEdgeList:
    def test_directed_edge_list(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", weight=-2)
        G.add_edge("A", "C", weight=4)
        G.add_edge("B", "C", weight=1)
        edges, node_map = to_edge_list(G)
        assert sorted(edges) == [(0, 1, -2), (0, 2, 4), (1, 2, 1)]
        assert bellman_ford(edges, len(node_map)) == [0, -2, -1]

    def test_undirected_edge_list_has_both_directions(self):
        G = nx.Graph()
        G.add_edge("A", "B", weight=5)
        edges, _ = to_edge_list(G)
        assert sorted(edges) == [(0, 1, 5), (1, 0, 5)]

    def test_custom_attr_and_default(self):
        G = nx.DiGraph()
        G.add_edge(0, 1, cost=3)
        G.add_edge(1, 2)
        edges, _ = to_edge_list(G, weight_attr="cost", default_weight=10)
        assert sorted(edges) == [(0, 1, 3), (1, 2, 10)]
