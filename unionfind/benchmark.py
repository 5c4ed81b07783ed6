from typing import List, Tuple
import numpy as np

from tools.data_structures import DisjointSet
from tools.util import Benchmark
from tools import log


def chain_forest(n_elements: int) -> DisjointSet:
    """A single set where each element points to the previous one, 0 is the root."""
    return DisjointSet([None] + list(range(n_elements - 1)) if n_elements > 0 else [])


def random_operations(n_elements: int, num_unions: int, num_finds: int,
                      seed: int = 0) -> Tuple[np.ndarray, np.ndarray]:
    """Random index pairs for unions, and indices for finds."""
    rng = np.random.default_rng(seed)
    unions = rng.integers(0, n_elements, size=(num_unions, 2))
    finds = rng.integers(0, n_elements, size=num_finds)
    return unions, finds


def run_benchmark(forest: DisjointSet, unions: np.ndarray,
                  finds: np.ndarray) -> Tuple[Benchmark, bool]:
    """Run the same unions and finds with both the naive and the compressed operations.

    Returns
    -------
    bench: call durations of both variants.
    agree: whether the two variants ended up with the same sets and find results.
    """
    bench = Benchmark()

    naive = forest.copy()
    naive_roots: List[int] = []
    bench.restart_timer()
    for i, j in unions:
        naive = naive.union(int(i), int(j))
        bench.register_call("union")
    for i in finds:
        naive_roots.append(naive.find(int(i)))
        bench.register_call("find")

    compressed = forest.copy()
    compressed_roots: List[int] = []
    bench.restart_timer()
    for i, j in unions:
        compressed.compressed_union(int(i), int(j))
        bench.register_call("compressed_union")
    for i in finds:
        compressed_roots.append(compressed.compressed_find(int(i)))
        bench.register_call("compressed_find")

    # roots may differ between the two, only the grouping has to match
    same_sets = naive.sets() == compressed.sets()
    same_finds = all(naive.find(a) == naive.find(b)
                     for a, b in zip(naive_roots, compressed_roots))
    agree = same_sets and same_finds
    if not agree:
        log.error("Naive and compressed operations resulted in different sets.")
    return bench, agree
