"""Check print-queue updates against page ordering rules."""

from __future__ import annotations

import argparse
import sys
from collections import defaultdict
from collections.abc import Mapping, Sequence
from pathlib import Path


def parse_input(
    text: str,
) -> tuple[dict[int, list[int]], dict[int, list[int]], list[list[int]]]:
    """Parse rules and updates.

    Returns ``(befores, afters, updates)``: ``befores`` maps a page to the pages
    that must precede it, ``afters`` maps a page to the pages that must follow it.
    """
    rules_text, sep, updates_text = text.partition("\n\n")
    if not sep:
        raise ValueError("expected a blank line between rules and updates")

    befores: defaultdict[int, list[int]] = defaultdict(list)
    afters: defaultdict[int, list[int]] = defaultdict(list)
    for line in rules_text.splitlines():
        before, bar, after = line.partition("|")
        if not bar:
            raise ValueError(f"malformed rule {line!r}")
        first, second = int(before), int(after)
        befores[second].append(first)
        afters[first].append(second)

    updates = [[int(page) for page in line.split(",")] for line in updates_text.splitlines()]
    return dict(befores), dict(afters), updates


def is_valid_update(
    update: Sequence[int],
    befores: Mapping[int, Sequence[int]],
    afters: Mapping[int, Sequence[int]],
) -> bool:
    """True if no page appears on the wrong side of another page."""
    for idx, page in enumerate(update):
        if any(page in befores.get(earlier, ()) for earlier in update[:idx]):
            return False
        if any(page in afters.get(later, ()) for later in update[idx + 1 :]):
            return False
    return True


def sum_valid_middle_pages(text: str) -> int:
    """Sum of the middle page of every correctly ordered update."""
    befores, afters, updates = parse_input(text)
    return sum(
        update[len(update) // 2]
        for update in updates
        if is_valid_update(update, befores, afters)
    )


def _read_input(path: str | None) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check print-queue updates.")
    parser.add_argument("input", nargs="?", help="puzzle input file (default: stdin)")
    args = parser.parse_args(argv)
    print(sum_valid_middle_pages(_read_input(args.input)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())