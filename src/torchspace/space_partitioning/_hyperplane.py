"""Axis-aligned splitting hyperplane."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from torch import Tensor


@dataclass(frozen=True)
class Hyperplane:
    """Axis-aligned split used at every internal node of a k-d tree.

    Points with ``point[axis] <= value`` belong to the left subtree and
    points with ``point[axis] > value`` to the right subtree.

    Parameters
    ----------
    axis : int
        Coordinate index of the split, in ``[0, d)``.
    value : int or float
        Position of the hyperplane along ``axis``.

    Examples
    --------
    >>> plane = Hyperplane(axis=1, value=0.5)
    >>> plane.goes_left(torch.tensor([3.0, 0.25]))
    True
    """

    axis: int
    value: Union[int, float]

    def __post_init__(self) -> None:
        if self.axis < 0:
            raise ValueError(f"axis must be non-negative, got {self.axis}")

    def goes_left(self, point: Tensor) -> bool:
        """Whether ``point`` falls on the left (``<=``) side of the split."""
        return bool(point[self.axis] <= self.value)
