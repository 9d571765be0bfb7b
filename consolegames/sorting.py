"""Sorting algorithms and a small timing benchmark for them."""

from __future__ import annotations

import argparse
import bisect
import random
import sys
import time
from collections.abc import Callable, Iterable, Sequence

SortFunction = Callable[[Iterable[int]], list[int]]


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return a new sorted list, built by inserting each value in turn."""
    result: list[int] = []
    for value in values:
        bisect.insort_right(result, value)
    return result


def _merge(left: Sequence[int], right: Sequence[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a new sorted list using a stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return a new sorted list using quicksort with a middle pivot."""
    items = list(values)
    if len(items) <= 1:
        return items
    pivot = items[len(items) // 2]
    less = [v for v in items if v < pivot]
    equal = [v for v in items if v == pivot]
    greater = [v for v in items if v > pivot]
    return quick_sort(less) + equal + quick_sort(greater)


def random_values(count: int, rng: random.Random | None = None) -> list[int]:
    """Return ``count`` random integers in the range ``0 <= v < count``."""
    if count < 0:
        raise ValueError("count must not be negative")
    rng = rng or random.Random()
    return [rng.randrange(count) for _ in range(count)]


def time_sort(sort: SortFunction, values: Iterable[int]) -> tuple[list[int], float]:
    """Run ``sort`` on ``values``; return the result and the CPU time in ms."""
    items = list(values)
    start = time.process_time()
    result = sort(items)
    elapsed = time.process_time() - start
    return result, elapsed * 1000.0


_ALGORITHMS: dict[str, tuple[SortFunction, int]] = {
    "insertion": (insertion_sort, 20000),
    "merge": (merge_sort, 400000),
    "quick": (quick_sort, 20000),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Sort random data with the chosen algorithm and print the time taken."""
    parser = argparse.ArgumentParser(description="Time a sorting algorithm.")
    parser.add_argument("algorithm", choices=sorted(_ALGORITHMS))
    parser.add_argument("--size", type=int, default=None, help="number of values")
    args = parser.parse_args(argv)

    sort, default_size = _ALGORITHMS[args.algorithm]
    size = default_size if args.size is None else args.size
    if size < 0:
        parser.error("size must not be negative")

    values = random_values(size, random.Random())
    _, elapsed_ms = time_sort(sort, values)
    sys.stdout.write(f"Tempo de execucao: {elapsed_ms:f} ms\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())