"""Linear-scan nearest neighbor, the reference for tree queries."""

from __future__ import annotations

from typing import Optional, Tuple

import torch
from torch import Tensor

from ._exceptions import DimensionalityMismatchError


def brute_force_nearest_neighbor(
    points: Tensor,
    query: Tensor,
) -> Optional[Tuple[int, float]]:
    """Closest row of ``points`` to ``query`` by exhaustive comparison.

    Parameters
    ----------
    points : Tensor, shape (n, d)
        Candidate points.
    query : Tensor, shape (d,)
        Query point.

    Returns
    -------
    tuple of (int, float), or None
        ``(index, distance)`` of the closest point, lowest index on ties.
        ``None`` when ``points`` is empty.

    Raises
    ------
    DimensionalityMismatchError
        If ``query`` does not have the points' dimension.

    Examples
    --------
    >>> points = torch.tensor([[0.0, 0.0], [3.0, 4.0]])
    >>> brute_force_nearest_neighbor(points, torch.tensor([3.0, 3.0]))
    (1, 1.0)
    """
    if points.dim() != 2:
        raise DimensionalityMismatchError(
            f"points must be 2D (n, d), got {points.dim()}D"
        )
    if points.size(0) == 0:
        return None
    if query.dim() != 1 or query.size(0) != points.size(1):
        raise DimensionalityMismatchError(
            f"Query dimension ({tuple(query.shape)}) must match "
            f"points dimension ({points.size(1)})"
        )

    delta = points.to(torch.float64) - query.to(torch.float64)
    distances = torch.linalg.vector_norm(delta, dim=-1)
    index = int(torch.argmin(distances))
    return index, distances[index].item()
