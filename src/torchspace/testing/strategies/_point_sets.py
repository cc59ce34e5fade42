from typing import Optional

import hypothesis.extra.numpy
import hypothesis.strategies
import numpy
import torch

from ._coordinates import coordinates


@hypothesis.strategies.composite
def point_sets(
    draw: hypothesis.strategies.DrawFn,
    dtype: torch.dtype = torch.float64,
    dimension: Optional[int] = None,
    min_points: int = 0,
    max_points: int = 64,
    max_dimension: int = 4,
    elements: Optional[hypothesis.strategies.SearchStrategy] = None,
) -> torch.Tensor:
    """Generate point sets of shape (n, d).

    Duplicate coordinates and duplicate points are allowed, so the
    degenerate split paths of tree construction get exercised. Integer
    dtypes draw integer coordinates.
    """
    if dimension is None:
        dimension = draw(
            hypothesis.strategies.integers(
                min_value=1, max_value=max_dimension
            )
        )
    n = draw(
        hypothesis.strategies.integers(
            min_value=min_points, max_value=max_points
        )
    )

    if dtype.is_floating_point:
        np_dtype = numpy.float64  # Cast to dtype after generation
        if elements is None:
            elements = coordinates(min_value=-100.0, max_value=100.0)
    else:
        np_dtype = numpy.int64
        if elements is None:
            elements = hypothesis.strategies.integers(
                min_value=-100, max_value=100
            )

    arr = draw(
        hypothesis.extra.numpy.arrays(
            np_dtype, (n, dimension), elements=elements
        )
    )
    return torch.tensor(arr, dtype=dtype)
