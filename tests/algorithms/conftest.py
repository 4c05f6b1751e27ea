"""Sample graphs shared by the algorithm tests."""

import pytest

from graphkit.types.base import INF


@pytest.fixture
def disconnected_matrix():
    # Undirected, two components:
    #
    #    0───1───5     6───7
    #    │   │   │
    #    2   3───┘
    #     \  │
    #       4
    #
    # Edges: 0-1, 0-2, 1-3, 1-5, 2-4, 3-4, 3-5, 6-7
    return [
        [0, 1, 1, 0, 0, 0, 0, 0],
        [1, 0, 0, 1, 0, 1, 0, 0],
        [1, 0, 0, 0, 1, 0, 0, 0],
        [0, 1, 0, 0, 1, 1, 0, 0],
        [0, 0, 1, 1, 0, 0, 0, 0],
        [0, 1, 0, 1, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0, 1],
        [0, 0, 0, 0, 0, 0, 1, 0],
    ]


@pytest.fixture
def triangle_with_tail():
    #  0───1
    #   \ /
    #    2───3
    return [[1, 2], [0, 2], [0, 1, 3], [2]]


@pytest.fixture
def tree_5():
    #      0
    #     / \
    #    1   2
    #   / \
    #  3   4
    return [[1, 2], [0, 3, 4], [0], [1], [1]]


@pytest.fixture
def forest_with_cycle():
    # Component {0, 1} is a tree; component {2, 3, 4} is a triangle.
    return [[1], [0], [3, 4], [2, 4], [2, 3]]


@pytest.fixture
def weighted_digraph_1():
    # Directed, weights in brackets:
    #   0->1 [4], 0->2 [4], 1->0 [4], 1->2 [2]
    #   2->3 [3], 2->4 [1], 2->5 [6]
    #   3->2 [3], 3->5 [2], 4->2 [1], 4->5 [3]
    #   5->3 [2], 5->4 [3]
    # Vertex 6 is isolated.
    return [
        [(1, 4), (2, 4)],
        [(0, 4), (2, 2)],
        [(3, 3), (4, 1), (5, 6)],
        [(2, 3), (5, 2)],
        [(2, 1), (5, 3)],
        [(3, 2), (4, 3)],
        [],
    ]


@pytest.fixture
def dag_edges():
    # 0 -5-> 1 -(-3)-> 5 -1-> 3 -6-> 2 -3-> 4
    #        1 -(-2)-> 2      3 -(-2)-> 4
    return [
        (3, 2, 6),
        (5, 3, 1),
        (0, 1, 5),
        (1, 5, -3),
        (1, 2, -2),
        (3, 4, -2),
        (2, 4, 3),
    ]


@pytest.fixture
def negative_cycle_edges():
    # 1 -> 5 -> 3 -> 2 -> 1 has total weight -3 + 1 + 6 - 5 = -1
    return [
        (3, 2, 6),
        (5, 3, 1),
        (0, 1, 5),
        (1, 5, -3),
        (2, 1, -5),
        (3, 4, -2),
        (2, 4, 3),
    ]


@pytest.fixture
def weighted_matrix_4():
    return [
        [0, 3, INF, 7],
        [8, 0, 2, INF],
        [5, INF, 0, 1],
        [2, INF, INF, 0],
    ]


@pytest.fixture
def undirected_weighted_5():
    # Metric:
    #    0───[2]───1
    #     \       /
    #     [1]   [1]
    #       \   /
    #         2
    #        / \
    #      [2] [2]
    #      /     \
    #     3──[1]──4
    return [
        [(1, 2), (2, 1)],
        [(0, 2), (2, 1)],
        [(0, 1), (1, 1), (4, 2), (3, 2)],
        [(2, 2), (4, 1)],
        [(2, 2), (3, 1)],
    ]


@pytest.fixture
def diamond_dag():
    #    0
    #   / \
    #  1   2
    #   \ /
    #    3
    return [[1, 2], [3], [3], []]
