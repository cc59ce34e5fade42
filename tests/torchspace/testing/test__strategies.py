import hypothesis
import torch

from torchspace.testing.strategies import (
    coordinates,
    point_sets,
    query_points,
)


class TestPointSets:
    """Tests for the point set strategy."""

    @hypothesis.settings(max_examples=25)
    @hypothesis.given(point_sets(dimension=3, min_points=2, max_points=5))
    def test_shape(self, points):
        assert points.dim() == 2
        assert points.size(1) == 3
        assert 2 <= points.size(0) <= 5

    @hypothesis.settings(max_examples=25)
    @hypothesis.given(point_sets(dtype=torch.float32))
    def test_dtype(self, points):
        assert points.dtype == torch.float32
        assert not torch.isnan(points).any()

    @hypothesis.settings(max_examples=25)
    @hypothesis.given(point_sets(dtype=torch.int64, min_points=1))
    def test_integer_dtype(self, points):
        assert points.dtype == torch.int64
        assert points.abs().max() <= 100


class TestQueryPoints:
    """Tests for the query point strategy."""

    @hypothesis.settings(max_examples=25)
    @hypothesis.given(query_points(4))
    def test_shape(self, query):
        assert query.shape == (4,)
        assert query.dtype == torch.float64


class TestCoordinates:
    """Tests for the coordinate strategy."""

    @hypothesis.settings(max_examples=25)
    @hypothesis.given(coordinates(min_value=-1.0, max_value=1.0))
    def test_bounded_and_finite(self, x):
        assert -1.0 <= x <= 1.0
