"""Exceptions for space partitioning structures."""


class SpacePartitioningError(Exception):
    """Base exception for space partitioning errors."""

    pass


class EmptyInputError(SpacePartitioningError):
    """Raised when an operation requiring at least one point receives none.

    This occurs when:
    - Selecting a split axis or median over an empty point set
    - Computing per-axis bounds of an empty point set
    - Running a batched query against an empty tree
    """

    pass


class DimensionalityMismatchError(SpacePartitioningError):
    """Raised when two values expected to share a coordinate count do not.

    This occurs when:
    - Measuring the distance between points of different dimension
    - A point has too few coordinates for a hyperplane axis
    - Building from ragged point sequences
    - Querying a tree with a point of the wrong dimension
    """

    pass
