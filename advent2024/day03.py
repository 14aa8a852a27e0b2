"""Evaluate the enabled ``mul(a,b)`` instructions in corrupted memory."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass
from pathlib import Path

DONT = "don't()"
DO = "do()"

_MUL = re.compile(r"mul\(([0-9]{1,3}),([0-9]{1,3})\)")
_NEXT_MARKER = re.compile(r"don't\(\)|mul\([0-9]{1,3},[0-9]{1,3}\)")


@dataclass(frozen=True)
class MulInstruction:
    """A single multiplication of two operands of at most three digits."""

    a: int
    b: int

    def run(self) -> int:
        return self.a * self.b


@dataclass(frozen=True)
class ActiveSegment:
    """The instructions between an enabling point and the next ``don't()``."""

    mul_instructions: tuple[MulInstruction, ...]

    def run(self) -> int:
        return sum(instruction.run() for instruction in self.mul_instructions)


@dataclass(frozen=True)
class Program:
    """All active segments found in a piece of memory."""

    active_segments: tuple[ActiveSegment, ...]

    def run(self) -> int:
        return sum(segment.run() for segment in self.active_segments)


def _skip_corrupt(text: str, pos: int) -> int | None:
    """Position of the next ``don't()`` or valid ``mul``, or None if there is none."""
    match = _NEXT_MARKER.search(text, pos)
    return match.start() if match else None


def _parse_segment(text: str, pos: int) -> tuple[ActiveSegment, int] | None:
    instructions: list[MulInstruction] = []
    while True:
        start = _skip_corrupt(text, pos)
        if start is None:
            # Nothing left to end the segment with.
            return None
        match = _MUL.match(text, start)
        if match is None:
            break
        instructions.append(MulInstruction(int(match.group(1)), int(match.group(2))))
        pos = match.end()
    # The next marker is necessarily a don't(), which closes the segment.
    return ActiveSegment(tuple(instructions)), start + len(DONT)


def _skip_disabled(text: str, pos: int) -> int:
    index = text.find(DO, pos)
    return len(text) if index < 0 else index + len(DO)


def parse_program(text: str) -> Program:
    """Parse the memory into active segments, each closed by ``don't()``.

    Parsing stops at the first segment that is not closed; such a trailing
    segment contributes nothing. A memory without any closed segment is an
    error.
    """
    segments: list[ActiveSegment] = []
    pos = 0
    while (parsed := _parse_segment(text, pos)) is not None:
        segment, end = parsed
        segments.append(segment)
        pos = _skip_disabled(text, end)
    if not segments:
        raise ValueError("memory holds no active segment closed by don't()")
    return Program(tuple(segments))


def _read_input(path: str | None) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the enabled mul instructions.")
    parser.add_argument("input", nargs="?", help="puzzle input file (default: stdin)")
    args = parser.parse_args(argv)
    program = parse_program(_read_input(args.input))
    print(program.run())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())