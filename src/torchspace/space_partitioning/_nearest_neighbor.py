"""Nearest-neighbor queries with hyperplane pruning."""

from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple, Union

import torch
from tensordict import tensorclass
from torch import Tensor

from ._exceptions import DimensionalityMismatchError, EmptyInputError
from ._geometry import hyperplane_distance, point_distance
from ._kd_tree import KdTree
from ._node import Leaf


@tensorclass
class NearestNeighbors:
    """Nearest neighbors of a batch of query points.

    Use `nearest_neighbors()` to construct instances.

    Attributes
    ----------
    indices : Tensor
        Row of the tree's points closest to each query, shape (m,), int64.
    distances : Tensor
        Euclidean distance from each query to its neighbor, shape (m,).

    Examples
    --------
    >>> tree = kd_tree(torch.randn(100, 3))
    >>> result = nearest_neighbors(tree, torch.randn(10, 3))
    >>> result[0]  # First query
    NearestNeighbors(...)
    """

    indices: Tensor
    distances: Tensor


def _as_query(query: Union[Tensor, Sequence[float]], tree: KdTree) -> Tensor:
    if not isinstance(query, Tensor):
        query = torch.as_tensor(query)
    if query.dim() != 1 or query.size(0) != tree.dimension:
        raise DimensionalityMismatchError(
            f"Query dimension ({tuple(query.shape)}) must match "
            f"tree dimension ({tree.dimension})"
        )
    if query.is_floating_point() and torch.isnan(query).any():
        raise ValueError("query must not contain NaN")
    return query.to(tree.points.device)


def _search(tree: KdTree, query: Tensor) -> Tuple[int, float]:
    # Distances are measured in float64 so that differences of large
    # float32 coordinates do not overflow.
    query = query.to(torch.float64)
    best_index = -1
    best_distance = math.inf

    # Entries are (node, lower bound on the distance to any point in it).
    # The near child is pushed last so it is explored first.
    stack = [(tree.root, 0.0)]
    while stack:
        node, bound = stack.pop()
        if bound >= best_distance:
            continue

        if isinstance(node, Leaf):
            point = tree.points[node.point_index].to(torch.float64)
            distance = point_distance(query, point).item()
            # The first leaf reached is kept even at an infinite distance.
            if best_index < 0 or distance < best_distance:
                best_index = node.point_index
                best_distance = distance
            continue

        plane = node.hyperplane
        if plane.goes_left(query):
            near, far = node.left, node.right
        else:
            near, far = node.right, node.left
        stack.append((far, hyperplane_distance(query, plane).item()))
        stack.append((near, bound))

    return best_index, best_distance


def nearest_neighbor_with_distance(
    tree: KdTree,
    query: Union[Tensor, Sequence[float]],
) -> Optional[Tuple[int, float]]:
    """Index of the closest point to ``query`` and its distance.

    Parameters
    ----------
    tree : KdTree
        Spatial index built by kd_tree().
    query : Tensor, shape (d,), or sequence of numbers
        Query point.

    Returns
    -------
    tuple of (int, float), or None
        ``(index, distance)`` of the closest point, ``None`` when the tree
        is empty.

    Raises
    ------
    DimensionalityMismatchError
        If ``query`` does not have the tree's dimension.

    Notes
    -----
    The search descends first into the child on the query's side of each
    hyperplane. The other child is visited only when the hyperplane is
    strictly closer than the best point found so far; every point beyond
    the hyperplane is at least that far away, so skipped subtrees cannot
    hold a closer point. When several points are equally close, the first
    one reached wins.
    """
    if tree.is_empty:
        return None

    return _search(tree, _as_query(query, tree))


def nearest_neighbor(
    tree: KdTree,
    query: Union[Tensor, Sequence[float]],
) -> Optional[int]:
    """Index of the point in ``tree`` closest to ``query``.

    Parameters
    ----------
    tree : KdTree
        Spatial index built by kd_tree().
    query : Tensor, shape (d,), or sequence of numbers
        Query point.

    Returns
    -------
    int or None
        Row of ``tree.points`` closest to ``query``, ``None`` when the tree
        is empty.

    Raises
    ------
    DimensionalityMismatchError
        If ``query`` does not have the tree's dimension.

    Examples
    --------
    >>> tree = kd_tree([[0, 0], [10, 0], [0, 10], [10, 10]])
    >>> nearest_neighbor(tree, [1, 1])
    0
    >>> nearest_neighbor(tree, [9, 9])
    3
    """
    result = nearest_neighbor_with_distance(tree, query)
    if result is None:
        return None
    return result[0]


def nearest_neighbors(tree: KdTree, queries: Tensor) -> NearestNeighbors:
    """Find the nearest neighbor of each query point.

    Parameters
    ----------
    tree : KdTree
        Spatial index built by kd_tree().
    queries : Tensor, shape (m, d)
        Query points.

    Returns
    -------
    NearestNeighbors
        Indices and distances with batch size ``[m]``.

    Raises
    ------
    EmptyInputError
        If the tree holds no points.
    DimensionalityMismatchError
        If ``queries`` is not 2D or its points do not have the tree's
        dimension.

    Examples
    --------
    >>> points = torch.randn(1000, 3)
    >>> tree = kd_tree(points)
    >>> result = nearest_neighbors(tree, torch.randn(10, 3))
    >>> result.indices.shape
    torch.Size([10])
    """
    if queries.dim() != 2:
        raise DimensionalityMismatchError(
            f"queries must be 2D (m, d), got {queries.dim()}D"
        )
    if tree.is_empty:
        raise EmptyInputError("cannot query an empty tree")

    m = queries.size(0)
    indices = torch.empty(m, dtype=torch.int64)
    distances = torch.empty(m, dtype=torch.float64)
    for i in range(m):
        indices[i], distances[i] = _search(tree, _as_query(queries[i], tree))

    if tree.points.is_floating_point():
        distances = distances.to(tree.points.dtype)

    return NearestNeighbors(
        indices=indices.to(tree.points.device),
        distances=distances.to(tree.points.device),
        batch_size=[m],
    )
