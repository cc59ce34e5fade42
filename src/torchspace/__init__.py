"""torchspace: PyTorch spatial indexing for exact nearest-neighbor search."""

from . import space_partitioning

__all__ = [
    "space_partitioning",
]

__version__ = "0.1.0"
