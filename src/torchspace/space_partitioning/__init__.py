"""Spatial data structures for exact nearest-neighbor search.

This module provides a k-d tree built by median splits on the axis of
highest spread, with:
- Axis-aligned hyperplanes and immutable, value-comparable nodes
- Geometry primitives (per-axis bounds, split axis and median selection,
  point and hyperplane distances)
- Single and batched nearest-neighbor queries with hyperplane pruning
- Thread-safe concurrent queries on a built tree

Note: Invalid input raises EmptyInputError or DimensionalityMismatchError
(both SpacePartitioningError) instead of returning sentinel values.
"""

from ._brute_force import brute_force_nearest_neighbor
from ._exceptions import (
    DimensionalityMismatchError,
    EmptyInputError,
    SpacePartitioningError,
)
from ._geometry import (
    axis_of_highest_variance,
    hyperplane_distance,
    median_value_in_axis,
    min_max_per_axis,
    point_distance,
)
from ._hyperplane import Hyperplane
from ._kd_tree import KdTree, kd_tree
from ._nearest_neighbor import (
    NearestNeighbors,
    nearest_neighbor,
    nearest_neighbor_with_distance,
    nearest_neighbors,
)
from ._node import (
    Internal,
    Leaf,
    Node,
    depth,
    format_node,
    leaf_indices,
    node_count,
)

__all__ = [
    "DimensionalityMismatchError",
    "EmptyInputError",
    "Hyperplane",
    "Internal",
    "KdTree",
    "Leaf",
    "NearestNeighbors",
    "Node",
    "SpacePartitioningError",
    "axis_of_highest_variance",
    "brute_force_nearest_neighbor",
    "depth",
    "format_node",
    "hyperplane_distance",
    "kd_tree",
    "leaf_indices",
    "median_value_in_axis",
    "min_max_per_axis",
    "nearest_neighbor",
    "nearest_neighbor_with_distance",
    "nearest_neighbors",
    "node_count",
    "point_distance",
]
