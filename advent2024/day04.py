"""Find XMAS words and X-shaped MAS crosses in a square letter grid."""

from __future__ import annotations

import argparse
import sys
from collections import defaultdict
from collections.abc import Iterator
from pathlib import Path

SEARCH = "XMAS"
SEARCH_BACKWARDS = "SAMX"
_LETTERS = frozenset("XMAS")
_CROSS_ENDS = {"M", "S"}


def _rows(text: str) -> list[str]:
    """Return the grid as rows, keeping only the letters X, M, A and S."""
    size = len(text.splitlines())
    letters = "".join(c for c in text if c in _LETTERS)
    if len(letters) != size * size:
        raise ValueError(
            f"expected a square grid of {size}x{size} letters, found {len(letters)} letters"
        )
    return [letters[row * size : (row + 1) * size] for row in range(size)]


def _all_lines(rows: list[str]) -> Iterator[str]:
    """Yield every row, column and diagonal of the grid."""
    yield from rows
    yield from ("".join(column) for column in zip(*rows))

    falling: defaultdict[int, list[str]] = defaultdict(list)
    rising: defaultdict[int, list[str]] = defaultdict(list)
    for row, line in enumerate(rows):
        for col, letter in enumerate(line):
            falling[row - col].append(letter)
            rising[row + col].append(letter)
    yield from ("".join(diagonal) for diagonal in falling.values())
    yield from ("".join(diagonal) for diagonal in rising.values())


def count_xmas(text: str) -> int:
    """Count XMAS horizontally, vertically and diagonally, in both directions."""
    return sum(
        line.count(SEARCH) + line.count(SEARCH_BACKWARDS) for line in _all_lines(_rows(text))
    )


def count_x_mas(text: str) -> int:
    """Count the places where two MAS words cross diagonally on a shared A."""
    rows = _rows(text)
    size = len(rows)
    found = 0
    for row in range(1, size - 1):
        for col in range(1, size - 1):
            if rows[row][col] != "A":
                continue
            falling = {rows[row - 1][col - 1], rows[row + 1][col + 1]}
            rising = {rows[row - 1][col + 1], rows[row + 1][col - 1]}
            if falling == _CROSS_ENDS and rising == _CROSS_ENDS:
                found += 1
    return found


def _read_input(path: str | None) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Search a letter grid for XMAS.")
    parser.add_argument("input", nargs="?", help="puzzle input file (default: stdin)")
    args = parser.parse_args(argv)
    text = _read_input(args.input)
    print(count_xmas(text))
    print(count_x_mas(text))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())