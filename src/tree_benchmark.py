"""
Benchmark helpers for OrderedTree.

Generates large sets of distinct random integers and times bulk insertion and
single deletions, the workload used to profile the tree on ~1,000,000 nodes.
"""

import operator
import time
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np

from ordered_tree import OrderedTree

SEED = 42
LARGE_DATA_SIZE = 1_000_000
VALUE_HIGH = 2_000_000
ORDERINGS = ("random", "sorted")


def make_large_data(
    size: int = LARGE_DATA_SIZE,
    high: int = VALUE_HIGH,
    seed: Optional[int] = None,
) -> List[int]:
    """
    Draw ``size`` distinct integers uniformly from [1, high) in random order.

    Args:
        size: Number of values to draw
        high: Exclusive upper bound of the value range
        seed: Seed for the NumPy generator; None draws fresh entropy

    Returns:
        List of plain Python ints, no duplicates
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    if size > high - 1:
        raise ValueError(f"cannot draw {size} distinct values from [1, {high})")
    rng = np.random.default_rng(seed)
    return rng.choice(np.arange(1, high), size=size, replace=False).tolist()


def build_tree(
    values: Sequence[int], less: Callable[[int, int], bool] = operator.lt
) -> OrderedTree[int]:
    tree: OrderedTree[int] = OrderedTree(less)
    for value in values:
        tree.insert(value)
    return tree


def time_build(
    values: Sequence[int], less: Callable[[int, int], bool] = operator.lt
) -> Tuple[OrderedTree[int], float]:
    t0 = time.perf_counter()
    tree = build_tree(values, less)
    return tree, time.perf_counter() - t0


def time_delete(tree: OrderedTree[int], value: int) -> float:
    t0 = time.perf_counter()
    tree.delete(value)
    return time.perf_counter() - t0


def run_benchmark(
    sizes: Sequence[int],
    repeats: int = 3,
    seed: int = SEED,
    ordering: str = "random",
) -> Dict[str, np.ndarray]:
    """
    Time tree construction and a single deletion for each size.

    The deleted value is the one inserted halfway through the sequence. Each
    repeat builds a fresh tree, so every run deletes from a full tree.

    Args:
        sizes: Tree sizes to measure
        repeats: Runs per size; the median is reported
        seed: Seed for data generation
        ordering: 'random' for shuffled input, 'sorted' for ascending input

    Returns:
        Dict with 'sizes', 'build_seconds', 'delete_seconds' and 'heights'
    """
    if ordering not in ORDERINGS:
        raise ValueError(f"ordering must be one of {ORDERINGS}, got {ordering!r}")
    if repeats < 1:
        raise ValueError(f"repeats must be at least 1, got {repeats}")

    build_seconds = []
    delete_seconds = []
    heights = []

    for n in sizes:
        values = make_large_data(size=n, high=max(VALUE_HIGH, 2 * n + 1), seed=seed)
        if ordering == "sorted":
            values.sort()
        target = values[n // 2] if n else None

        build_runs = []
        delete_runs = []
        height = 0
        for _ in range(repeats):
            tree, elapsed = time_build(values)
            build_runs.append(elapsed)
            height = tree.height()
            if target is not None:
                delete_runs.append(time_delete(tree, target))

        build_seconds.append(np.median(build_runs))
        delete_seconds.append(np.median(delete_runs) if delete_runs else 0.0)
        heights.append(height)

    return {
        "sizes": np.asarray(sizes),
        "build_seconds": np.asarray(build_seconds),
        "delete_seconds": np.asarray(delete_seconds),
        "heights": np.asarray(heights),
    }


if __name__ == "__main__":
    print("=" * 60)
    print(f"Building tree from {LARGE_DATA_SIZE:,} distinct random values")
    print("=" * 60)

    data = make_large_data(seed=SEED)
    large_tree, build_time = time_build(data)
    print(f"Time to build tree with {len(large_tree):,} nodes: {build_time * 1000:.1f} ms")
    print(f"Tree height: {large_tree.height()}")

    victim = data[len(data) // 2]
    delete_time = time_delete(large_tree, victim)
    print(f"Time to delete value {victim}: {delete_time * 1e9:.0f} ns")
    print(f"Value still present after delete: {large_tree.find(victim)}")
