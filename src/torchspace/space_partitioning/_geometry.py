"""Geometry primitives used to build and search k-d trees.

All functions take a point set as a tensor of shape ``(n, d)`` or a single
point as a tensor of shape ``(d,)``. Invalid input is reported with
:class:`EmptyInputError` or :class:`DimensionalityMismatchError` rather
than a reserved numeric value.
"""

from __future__ import annotations

from typing import Union

import torch
from torch import Tensor

from ._exceptions import DimensionalityMismatchError, EmptyInputError
from ._hyperplane import Hyperplane


def _as_float(x: Tensor) -> Tensor:
    if x.is_floating_point():
        return x
    return x.to(torch.float64)


def min_max_per_axis(points: Tensor) -> Tensor:
    """Per-axis bounds of a point set.

    Parameters
    ----------
    points : Tensor, shape (n, d)
        Point set with at least one point.

    Returns
    -------
    Tensor, shape (d, 2)
        ``result[i] = (min, max)`` of coordinate ``i`` over all points.

    Raises
    ------
    EmptyInputError
        If ``points`` has no rows.

    Examples
    --------
    >>> min_max_per_axis(torch.tensor([[0.0, 5.0], [2.0, 1.0]]))
    tensor([[0., 2.],
            [1., 5.]])
    """
    if points.dim() != 2:
        raise DimensionalityMismatchError(
            f"points must be 2D (n, d), got {points.dim()}D"
        )
    if points.size(0) == 0:
        raise EmptyInputError("min_max_per_axis requires at least one point")

    minimum, maximum = torch.aminmax(points, dim=0)
    return torch.stack([minimum, maximum], dim=-1)


def axis_of_highest_variance(points: Tensor) -> int:
    """Axis along which the point set is most spread out.

    The spread of an axis is ``|max - min|`` of its coordinates. Ties go to
    the lowest axis index.

    Raises
    ------
    EmptyInputError
        If ``points`` has no rows.
    """
    bounds = min_max_per_axis(points)
    spread = (_as_float(bounds[:, 1]) - _as_float(bounds[:, 0])).abs()
    # An axis pinned at +/-inf has inf - inf = nan spread; it does not vary.
    spread = torch.nan_to_num(spread, nan=0.0)
    # argmax returns the first maximal index
    return int(torch.argmax(spread))


def median_value_in_axis(points: Tensor, axis: int) -> Union[int, float]:
    """Lower-median coordinate of a point set along ``axis``.

    Returns the value at position ``n // 2`` of the coordinates in sorted
    order, found by selection rather than a full sort. For an even number
    of points this is the upper of the two middle values, never their
    average, so tree shapes are reproducible.

    Parameters
    ----------
    points : Tensor, shape (n, d)
        Point set with at least one point.
    axis : int
        Coordinate index, must be in ``[0, d)``.

    Returns
    -------
    int or float
        Coordinate value of one of the input points.

    Raises
    ------
    EmptyInputError
        If ``points`` has no rows.
    DimensionalityMismatchError
        If the points have ``axis`` or fewer coordinates.

    Examples
    --------
    >>> median_value_in_axis(torch.tensor([[1.0], [3.0], [2.0], [4.0]]), 0)
    3.0
    """
    if points.dim() != 2:
        raise DimensionalityMismatchError(
            f"points must be 2D (n, d), got {points.dim()}D"
        )
    n, d = points.shape
    if n == 0:
        raise EmptyInputError(
            "median_value_in_axis requires at least one point"
        )
    if not 0 <= axis < d:
        raise DimensionalityMismatchError(
            f"axis ({axis}) out of range for {d}-dimensional points"
        )

    # kthvalue is 1-based
    value, _ = torch.kthvalue(points[:, axis], n // 2 + 1)
    return value.item()


def point_distance(p1: Tensor, p2: Tensor) -> Tensor:
    """Euclidean distance between two points.

    Raises
    ------
    DimensionalityMismatchError
        If the points have a different number of coordinates.

    Examples
    --------
    >>> point_distance(torch.tensor([0.0, 0.0]), torch.tensor([3.0, 4.0]))
    tensor(5.)
    """
    if p1.shape != p2.shape:
        raise DimensionalityMismatchError(
            f"cannot measure distance between points of shape "
            f"{tuple(p1.shape)} and {tuple(p2.shape)}"
        )
    return torch.linalg.vector_norm(_as_float(p1) - _as_float(p2))


def hyperplane_distance(point: Tensor, hyperplane: Hyperplane) -> Tensor:
    """Distance from ``point`` to the nearest point on ``hyperplane``.

    Equal to ``|point[axis] - value|``. Every point on the far side of the
    split is at least this far from ``point``, which is what makes it safe
    to skip a subtree during a nearest-neighbor search.

    Raises
    ------
    DimensionalityMismatchError
        If ``point`` has ``hyperplane.axis`` or fewer coordinates.
    """
    if point.dim() != 1 or point.size(0) <= hyperplane.axis:
        raise DimensionalityMismatchError(
            f"point of shape {tuple(point.shape)} has no axis "
            f"{hyperplane.axis}"
        )
    return (_as_float(point[hyperplane.axis]) - hyperplane.value).abs()
