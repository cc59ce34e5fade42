"""Testing helpers for torchspace spatial indexes.

Example usage:

    import hypothesis

    from torchspace.space_partitioning import kd_tree, nearest_neighbor
    from torchspace.testing.strategies import point_sets, query_points

    @hypothesis.given(point_sets(min_points=1), hypothesis.strategies.data())
    def test_query(points, data):
        query = data.draw(query_points(points.size(1)))
        nearest_neighbor(kd_tree(points), query)
"""

from . import strategies

__all__ = [
    "strategies",
]
