"""Validation of completed 9x9 sudoku grids."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence

SIZE = 9
BOX = 3

Grid = list[list[int]]


def has_duplicates(cells: Iterable[int]) -> bool:
    """Return True if any digit 1-9 appears more than once in ``cells``."""
    seen: set[int] = set()
    for value in cells:
        if not 1 <= value <= SIZE:
            raise ValueError(f"digit out of range: {value}")
        if value in seen:
            return True
        seen.add(value)
    return False


def _units(grid: Sequence[Sequence[int]]) -> Iterator[list[int]]:
    yield from (list(row) for row in grid)
    yield from (list(column) for column in zip(*grid))
    for top in range(0, SIZE, BOX):
        for left in range(0, SIZE, BOX):
            yield [
                grid[r][c]
                for r in range(top, top + BOX)
                for c in range(left, left + BOX)
            ]


def is_valid(grid: Sequence[Sequence[int]]) -> bool:
    """Return True if no row, column or 3x3 box repeats a digit."""
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        raise ValueError("a sudoku grid must be 9x9")
    return not any(has_duplicates(unit) for unit in _units(grid))


def parse_instances(text: str) -> list[Grid]:
    """Parse a count followed by that many grids of 81 whitespace-separated digits."""
    tokens = iter(text.split())
    try:
        count = int(next(tokens))
    except StopIteration:
        raise ValueError("missing number of instances") from None
    if count < 0:
        raise ValueError("number of instances must not be negative")

    grids: list[Grid] = []
    for _ in range(count):
        try:
            grids.append(
                [[int(next(tokens)) for _ in range(SIZE)] for _ in range(SIZE)]
            )
        except StopIteration:
            raise ValueError("input ended in the middle of a grid") from None
    return grids


def report(grids: Iterable[Sequence[Sequence[int]]]) -> str:
    """Return the numbered SIM/NAO verdict for each grid."""
    parts = []
    for number, grid in enumerate(grids, start=1):
        verdict = "SIM" if is_valid(grid) else "NAO"
        parts.append(f"Instancia {number}\n{verdict}\n\n")
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Read sudoku instances from a file or standard input and judge them."""
    parser = argparse.ArgumentParser(description="Check completed sudoku grids.")
    parser.add_argument("file", nargs="?", help="input file (default: stdin)")
    args = parser.parse_args(argv)

    if args.file:
        with open(args.file, encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()

    sys.stdout.write(report(parse_instances(text)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())