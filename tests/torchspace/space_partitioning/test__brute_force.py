import pytest
import torch

from torchspace.space_partitioning import (
    DimensionalityMismatchError,
    brute_force_nearest_neighbor,
)


class TestBruteForceNearestNeighbor:
    """Tests for the linear-scan reference search."""

    def test_closest_point(self):
        points = torch.tensor([[0.0, 0.0], [3.0, 4.0], [-1.0, 1.0]])
        index, distance = brute_force_nearest_neighbor(
            points, torch.tensor([3.0, 3.0])
        )
        assert index == 1
        assert distance == pytest.approx(1.0)

    def test_ties_go_to_lowest_index(self):
        points = torch.tensor([[1.0, 0.0], [-1.0, 0.0], [0.0, 1.0]])
        index, distance = brute_force_nearest_neighbor(
            points, torch.tensor([0.0, 0.0])
        )
        assert index == 0
        assert distance == pytest.approx(1.0)

    def test_matches_cdist(self):
        torch.manual_seed(0)
        points = torch.randn(500, 3, dtype=torch.float64)
        query = torch.randn(3, dtype=torch.float64)
        index, distance = brute_force_nearest_neighbor(points, query)

        distances = torch.cdist(query[None], points)[0]
        assert index == int(torch.argmin(distances))
        assert distance == pytest.approx(distances.min().item())

    def test_integer_points(self):
        points = torch.tensor([[0, 0], [5, 5]])
        index, _ = brute_force_nearest_neighbor(points, torch.tensor([4, 4]))
        assert index == 1

    def test_empty_points(self):
        points = torch.empty(0, 2)
        result = brute_force_nearest_neighbor(points, torch.zeros(2))
        assert result is None

    def test_dimension_mismatch_raises(self):
        with pytest.raises(DimensionalityMismatchError):
            brute_force_nearest_neighbor(torch.zeros(3, 2), torch.zeros(3))

    def test_requires_2d_points(self):
        with pytest.raises(DimensionalityMismatchError, match="2D"):
            brute_force_nearest_neighbor(torch.zeros(3), torch.zeros(3))
