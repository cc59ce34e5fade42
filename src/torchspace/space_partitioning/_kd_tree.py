"""k-d tree built by median splits on the axis of highest spread."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

import torch
from torch import Tensor

from ._exceptions import DimensionalityMismatchError
from ._geometry import (
    axis_of_highest_variance,
    median_value_in_axis,
    min_max_per_axis,
)
from ._hyperplane import Hyperplane
from ._node import Internal, Leaf, Node, depth, format_node, leaf_indices

_LOW_PRECISION_DTYPES = (torch.float16, torch.bfloat16)


@dataclass(frozen=True, eq=False)
class KdTree:
    """k-d tree spatial data structure.

    Use `kd_tree()` to construct instances.

    Attributes
    ----------
    points : Tensor
        Original points, shape (n, d). Never modified by the tree.
    root : Leaf, Internal or None
        Root of the node tree, ``None`` for a tree built from no points.

    Notes
    -----
    Every leaf references exactly one row of ``points`` and every row is
    referenced by exactly one leaf. A built tree is immutable, so any
    number of queries may run against it concurrently.

    Examples
    --------
    >>> tree = kd_tree(torch.tensor([[0.0, 0.0], [10.0, 0.0]]))
    >>> tree.root.hyperplane
    Hyperplane(axis=0, value=0.0)
    """

    points: Tensor
    root: Optional[Node]

    @property
    def dimension(self) -> int:
        """Number of coordinates per point."""
        return self.points.size(1)

    @property
    def depth(self) -> int:
        """Number of node levels, 0 for an empty tree."""
        return depth(self.root)

    @property
    def is_empty(self) -> bool:
        return self.root is None

    def leaf_indices(self) -> List[int]:
        """Point indices in left-to-right leaf order."""
        return leaf_indices(self.root)

    def __len__(self) -> int:
        return self.points.size(0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KdTree):
            return NotImplemented
        return (
            self.points.shape == other.points.shape
            and torch.equal(self.points, other.points)
            and self.root == other.root
        )

    __hash__ = None

    def __str__(self) -> str:
        n, d = self.points.shape
        return f"KdTree(n={n}, d={d})\n{format_node(self.root)}"


def _as_points(
    points: Union[Tensor, Sequence[Sequence[float]]],
    dtype: Optional[torch.dtype],
) -> Tensor:
    if not isinstance(points, Tensor):
        points = list(points)
        if not points:
            return torch.empty(0, 0, dtype=dtype or torch.get_default_dtype())
        for point in points:
            if isinstance(point, Tensor):
                is_point = point.dim() == 1
            else:
                is_point = hasattr(point, "__len__")
            if not is_point:
                raise DimensionalityMismatchError(
                    f"each point must be a sequence of coordinates, got "
                    f"{point!r}"
                )
        lengths = {len(point) for point in points}
        if len(lengths) > 1:
            raise DimensionalityMismatchError(
                f"points must all have the same dimension, got dimensions "
                f"{sorted(lengths)}"
            )
        if all(isinstance(point, Tensor) for point in points):
            points = torch.stack(points)
            if dtype is not None:
                points = points.to(dtype)
        else:
            points = torch.as_tensor(points, dtype=dtype)
    elif dtype is not None:
        points = points.to(dtype)

    if points.dim() != 2:
        raise DimensionalityMismatchError(
            f"points must be 2D (n, d), got {points.dim()}D"
        )
    if points.size(0) > 0 and points.size(1) == 0:
        raise DimensionalityMismatchError(
            "points must have at least one coordinate"
        )
    if points.dtype == torch.bool or points.is_complex():
        raise ValueError(f"points must be real numbers, got {points.dtype}")
    if points.is_floating_point() and torch.isnan(points).any():
        raise ValueError("points must not contain NaN")

    return points


def _split(points: Tensor, indices: Tensor) -> tuple[Hyperplane, Tensor]:
    """Choose a split for ``points[indices]`` and the mask of left points.

    Both sides of the returned mask are non-empty for two or more points.
    """
    subset = points[indices]
    axis = axis_of_highest_variance(subset)
    coordinates = subset[:, axis]
    lower, upper = min_max_per_axis(subset)[axis].tolist()

    if lower == upper:
        # Every remaining point is identical: split by order.
        mask = torch.zeros(
            indices.numel(), dtype=torch.bool, device=indices.device
        )
        mask[: indices.numel() // 2] = True
        return Hyperplane(axis, lower), mask

    value = median_value_in_axis(subset, axis)
    if value == upper:
        # Median sits on the maximum; move the split to the next value
        # down so the right side keeps every point at the maximum.
        value = coordinates[coordinates < upper].max().item()

    return Hyperplane(axis, value), coordinates <= value


def _build(points: Tensor, indices: Tensor) -> Node:
    if indices.numel() == 1:
        return Leaf(int(indices[0]))

    hyperplane, mask = _split(points, indices)
    return Internal(
        hyperplane,
        _build(points, indices[mask]),
        _build(points, indices[~mask]),
    )


def kd_tree(
    points: Union[Tensor, Sequence[Sequence[float]]],
    *,
    dtype: Optional[torch.dtype] = None,
) -> KdTree:
    """Build a k-d tree from a point set.

    Each internal node splits its points on the axis with the largest
    coordinate range, at the lower median of that axis: points with
    ``coordinate <= median`` go left, the rest go right. Splitting stops
    at single points.

    Parameters
    ----------
    points : Tensor, shape (n, d), or sequence of sequences
        Points to index. Row ``i`` is referenced by the leaf with
        ``point_index == i``.
    dtype : torch.dtype, optional
        Cast the points to this dtype before building.

    Returns
    -------
    KdTree
        Tree over ``points``. Empty input yields a tree with ``root=None``.

    Raises
    ------
    DimensionalityMismatchError
        If the points do not all have the same dimension or the tensor is
        not 2D.
    ValueError
        If the points are not real numbers or contain NaN.

    Notes
    -----
    Median selection is linear per level, giving O(n log n) expected
    construction. When the median coincides with the largest coordinate
    the split moves to the next smaller coordinate, and a subset of
    identical points is split in half by order, so construction always
    terminates with depth at most n.

    Examples
    --------
    >>> tree = kd_tree([[0, 0], [10, 0], [0, 10], [10, 10]])
    >>> sorted(tree.leaf_indices())
    [0, 1, 2, 3]
    """
    points = _as_points(points, dtype)

    if points.dtype in _LOW_PRECISION_DTYPES:
        warnings.warn(
            f"Building a k-d tree from {points.dtype} points may produce "
            f"unreliable splits and distance ties. Consider float32 or "
            f"float64.",
            RuntimeWarning,
            stacklevel=2,
        )

    n = points.size(0)
    if n == 0:
        return KdTree(points=points, root=None)

    indices = torch.arange(n, device=points.device)
    return KdTree(points=points, root=_build(points, indices))
