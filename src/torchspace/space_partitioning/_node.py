"""k-d tree nodes: leaves referencing points and internal splits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Union

from ._hyperplane import Hyperplane


@dataclass(frozen=True)
class Leaf:
    """Terminal node referencing one point of the indexed set.

    Parameters
    ----------
    point_index : int
        Row of the original point set this leaf stands for.
    """

    point_index: int

    def __post_init__(self) -> None:
        if self.point_index < 0:
            raise ValueError(
                f"point_index must be non-negative, got {self.point_index}"
            )


@dataclass(frozen=True)
class Internal:
    """Splitting node owning a left and a right subtree.

    Parameters
    ----------
    hyperplane : Hyperplane
        Split separating the two subtrees.
    left : Leaf or Internal
        Subtree of points with ``point[hyperplane.axis] <= hyperplane.value``.
    right : Leaf or Internal
        Subtree of points on the other side of the split.

    Notes
    -----
    Nodes are immutable and compare by value: two subtrees are equal when
    their shape, hyperplanes and leaf indices all match, regardless of
    identity. ``copy.deepcopy`` therefore yields an equal, independent
    subtree.
    """

    hyperplane: Hyperplane
    left: Node
    right: Node

    def __post_init__(self) -> None:
        if self.left is None or self.right is None:
            raise ValueError("internal nodes require both children")


Node = Union[Leaf, Internal]


def _walk(node: Optional[Node]) -> Iterator[tuple[Node, int]]:
    # Pre-order, left before right, with 1-based depth.
    stack = [] if node is None else [(node, 1)]
    while stack:
        current, level = stack.pop()
        yield current, level
        if isinstance(current, Internal):
            stack.append((current.right, level + 1))
            stack.append((current.left, level + 1))


def leaf_indices(node: Optional[Node]) -> List[int]:
    """Point indices of all leaves below ``node``, left to right."""
    return [n.point_index for n, _ in _walk(node) if isinstance(n, Leaf)]


def depth(node: Optional[Node]) -> int:
    """Number of levels below and including ``node`` (0 for ``None``)."""
    return max((level for _, level in _walk(node)), default=0)


def node_count(node: Optional[Node]) -> int:
    """Total number of leaves and internal nodes below ``node``."""
    return sum(1 for _ in _walk(node))


def format_node(node: Optional[Node], *, indent: str = "  ") -> str:
    """Render a subtree as indented text, one node per line.

    Examples
    --------
    >>> tree = Internal(Hyperplane(0, 1.0), Leaf(0), Leaf(1))
    >>> print(format_node(tree))
    Internal(axis=0, value=1.0)
      Leaf(point_index=0)
      Leaf(point_index=1)
    """
    if node is None:
        return "<empty>"

    lines = []
    for current, level in _walk(node):
        prefix = indent * (level - 1)
        if isinstance(current, Leaf):
            lines.append(f"{prefix}Leaf(point_index={current.point_index})")
        else:
            plane = current.hyperplane
            lines.append(
                f"{prefix}Internal(axis={plane.axis}, value={plane.value})"
            )
    return "\n".join(lines)
