"""Hypothesis strategies for spatial index testing."""

from ._coordinates import coordinates
from ._point_sets import point_sets
from ._query_points import query_points

__all__ = [
    # Numeric strategies
    "coordinates",
    # Point strategies
    "point_sets",
    "query_points",
]
