import pytest
import torch

from torchspace.space_partitioning import Hyperplane


class TestHyperplane:
    """Tests for axis-aligned hyperplanes."""

    def test_fields(self):
        plane = Hyperplane(axis=2, value=1.5)
        assert plane.axis == 2
        assert plane.value == 1.5

    def test_value_equality(self):
        assert Hyperplane(0, 1.0) == Hyperplane(0, 1.0)
        assert Hyperplane(0, 1.0) != Hyperplane(1, 1.0)
        assert Hyperplane(0, 1.0) != Hyperplane(0, 2.0)

    def test_hashable(self):
        assert len({Hyperplane(0, 1.0), Hyperplane(0, 1.0)}) == 1

    def test_immutable(self):
        plane = Hyperplane(0, 1.0)
        with pytest.raises(AttributeError):
            plane.value = 2.0

    def test_negative_axis_rejected(self):
        with pytest.raises(ValueError, match="axis"):
            Hyperplane(axis=-1, value=0.0)

    def test_repr(self):
        assert repr(Hyperplane(1, 2.5)) == "Hyperplane(axis=1, value=2.5)"


class TestHyperplaneSide:
    """Tests for the left/right rule."""

    def test_below_goes_left(self):
        assert Hyperplane(0, 1.0).goes_left(torch.tensor([0.5, 9.0]))

    def test_equal_goes_left(self):
        """Points on the hyperplane belong to the left side."""
        assert Hyperplane(1, 2.0).goes_left(torch.tensor([9.0, 2.0]))

    def test_above_goes_right(self):
        assert not Hyperplane(0, 1.0).goes_left(torch.tensor([1.5, -9.0]))

    def test_integer_point(self):
        plane = Hyperplane(0, 2)
        assert plane.goes_left(torch.tensor([2, 0]))
        assert not plane.goes_left(torch.tensor([3, 0]))
