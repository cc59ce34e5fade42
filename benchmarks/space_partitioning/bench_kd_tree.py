"""Benchmarks for k-d tree construction and nearest-neighbor queries.

This module times torchspace k-d tree builds and compares pruned tree
queries against a linear scan over the same points.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import torch

# torchspace imports
from torchspace.space_partitioning import (
    brute_force_nearest_neighbor,
    kd_tree,
    nearest_neighbor,
    nearest_neighbors,
)


def benchmark(
    func: Callable, *args: Any, warmup: int = 3, iterations: int = 10
) -> tuple[float, float]:
    """Mean and standard deviation of the wall time of ``func(*args)``.

    Returns
    -------
    tuple of float
        ``(mean, std)`` in seconds over ``iterations`` timed calls, after
        ``warmup`` untimed calls.
    """
    for _ in range(warmup):
        func(*args)

    times = np.empty(iterations)
    for i in range(iterations):
        start = time.perf_counter()
        func(*args)
        times[i] = time.perf_counter() - start

    return float(times.mean()), float(times.std())


def format_time(seconds: float) -> str:
    for scale, unit in ((1e-6, "ns"), (1e-3, "us"), (1.0, "ms")):
        if seconds < scale:
            return f"{seconds * 1e3 / scale:.3f}{unit}"
    return f"{seconds:.3f}s"


def print_speedups(
    name: str, times: dict[str, tuple[float, float]], baseline: str
) -> None:
    """Print each method's time and its speedup over ``baseline``."""
    print(f"\n{name}")
    print("-" * len(name))

    reference, _ = times[baseline]
    for method_name, (mean, std) in times.items():
        print(
            f"  {method_name}: {format_time(mean)} +/- {format_time(std)} "
            f"({reference / mean:.1f}x vs {baseline})"
        )


class BenchKdTree:
    """Benchmarks for k-d tree build and query."""

    def __init__(self, warmup: int = 3, iterations: int = 10):
        self.warmup = warmup
        self.iterations = iterations

    def _bench(self, func: Callable, *args: Any) -> tuple[float, float]:
        return benchmark(
            func, *args, warmup=self.warmup, iterations=self.iterations
        )

    def bench_build(self, num_points: int = 2000, dim: int = 3) -> None:
        """Benchmark tree construction."""
        points = torch.randn(num_points, dim, dtype=torch.float64)
        mean, std = self._bench(kd_tree, points)
        print(
            f"\nkd_tree (n={num_points}, d={dim}): "
            f"{format_time(mean)} +/- {format_time(std)}"
        )

    def bench_query(
        self, num_points: int = 2000, dim: int = 3, num_queries: int = 50
    ) -> None:
        """Compare pruned tree queries with a linear scan."""
        points = torch.randn(num_points, dim, dtype=torch.float64)
        queries = torch.randn(num_queries, dim, dtype=torch.float64)
        tree = kd_tree(points)

        def tree_queries():
            for query in queries:
                nearest_neighbor(tree, query)

        def linear_scan():
            for query in queries:
                brute_force_nearest_neighbor(points, query)

        print_speedups(
            f"{num_queries} queries (n={num_points}, d={dim})",
            {
                "kd_tree": self._bench(tree_queries),
                "batched kd_tree": self._bench(
                    nearest_neighbors, tree, queries
                ),
                "linear scan": self._bench(linear_scan),
            },
            baseline="linear scan",
        )

    def run_all(self) -> None:
        """Run all benchmarks."""
        print("=" * 60)
        print("K-D TREE BENCHMARKS")
        print("=" * 60)

        print("\n--- Construction ---")
        self.bench_build()

        print("\n--- Queries ---")
        self.bench_query()

    def run_scaling(self) -> None:
        """Run scaling benchmarks with varying parameters."""
        print("=" * 60)
        print("SCALING BENCHMARKS")
        print("=" * 60)

        print("\n--- Point Count Scaling ---")
        for num_points in [500, 2000, 8000]:
            self.bench_build(num_points=num_points)
            self.bench_query(num_points=num_points)

        print("\n--- Dimension Scaling ---")
        for dim in [2, 4, 8, 16]:
            self.bench_query(dim=dim)


if __name__ == "__main__":
    bench = BenchKdTree(warmup=1, iterations=5)
    bench.run_all()
    print("\n")
    bench.run_scaling()
