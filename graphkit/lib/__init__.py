"""Library utilities for graphkit.

This package contains integration modules for external libraries.
"""

from graphkit.lib.nx import (
    NodeMap,
    to_adjacency_list,
    to_adjacency_matrix,
    to_edge_list,
)

__all__ = [
    "NodeMap",
    "to_adjacency_list",
    "to_adjacency_matrix",
    "to_edge_list",
]
