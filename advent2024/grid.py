"""A sparse two-dimensional grid keyed by row/column positions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar("T")


class Orientation(Enum):
    """Axis of a line on the grid."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    def flip(self) -> Orientation:
        """Return the other orientation."""
        if self is Orientation.HORIZONTAL:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL


class Direction(Enum):
    """One of the four grid directions."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def reverse(self) -> Direction:
        """Return the opposite direction."""
        return _REVERSED[self]

    def is_horizontal(self) -> bool:
        return self.orientation() is Orientation.HORIZONTAL

    def is_vertical(self) -> bool:
        return self.orientation() is Orientation.VERTICAL

    def orientation(self) -> Orientation:
        if self in (Direction.UP, Direction.DOWN):
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL


_REVERSED = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True, order=True)
class Position:
    """A non-negative grid coordinate, ordered by row and then column."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if self.row < 0 or self.col < 0:
            raise ValueError(f"position must be non-negative, got {self.row},{self.col}")

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


@dataclass(frozen=True)
class Element(Generic[T]):
    """A grid value together with the position it is stored at."""

    element: T
    pos: Position


class SparseGrid(Generic[T]):
    """A grid that only stores occupied cells and tracks its extent."""

    def __init__(self) -> None:
        self._elements: dict[Position, T] = {}
        self._max_row = 0
        self._max_col = 0
        self._most_down: set[Position] = set()
        self._most_right: set[Position] = set()

    def _update_dimensions(self) -> None:
        if not self._elements:
            self._max_row = 0
            self._max_col = 0
            self._most_down.clear()
            self._most_right.clear()
            return
        self._max_row = max(pos.row for pos in self._elements)
        self._max_col = max(pos.col for pos in self._elements)
        self._most_down = {p for p in self._elements if p.row == self._max_row}
        self._most_right = {p for p in self._elements if p.col == self._max_col}

    def height(self) -> int:
        return self._max_row + 1 if self._elements else 0

    def width(self) -> int:
        return self._max_col + 1 if self._elements else 0

    def put(self, pos: Position, element: T) -> T | None:
        """Store ``element`` at ``pos``, returning the value it replaced, if any."""
        if pos.row > self._max_row:
            self._max_row = pos.row
            self._most_down.clear()
        if pos.row == self._max_row:
            self._most_down.add(pos)

        if pos.col > self._max_col:
            self._max_col = pos.col
            self._most_right.clear()
        if pos.col == self._max_col:
            self._most_right.add(pos)

        previous = self._elements.get(pos)
        self._elements[pos] = element
        return previous

    def pop(self, pos: Position) -> Element[T] | None:
        """Remove and return the element at ``pos``, if there is one."""
        if pos.row == self._max_row:
            self._most_down.discard(pos)
        if pos.col == self._max_col:
            self._most_right.discard(pos)

        removed = None
        if pos in self._elements:
            removed = Element(self._elements.pop(pos), pos)

        if not self._most_down or not self._most_right:
            self._update_dimensions()
        return removed

    def get(self, pos: Position) -> Element[T] | None:
        if pos in self._elements:
            return Element(self._elements[pos], pos)
        return None

    def neighbour(self, of: Position, direction: Direction) -> Element[T] | None:
        """Return the direct neighbour of a grid cell, if any."""
        if direction is Direction.UP and of.row != 0:
            return self.get(Position(of.row - 1, of.col))
        if direction is Direction.DOWN and of.row < self._max_row:
            return self.get(Position(of.row + 1, of.col))
        if direction is Direction.LEFT and of.col != 0:
            return self.get(Position(of.row, of.col - 1))
        if direction is Direction.RIGHT and of.col < self._max_col:
            return self.get(Position(of.row, of.col + 1))
        return None

    def next_in_direction(self, start: Position, direction: Direction) -> Element[T] | None:
        """Return the nearest occupied cell from ``start`` along ``direction``."""
        choose: Callable[..., Position]
        if direction is Direction.UP:
            candidates = [p for p in self._elements if p.col == start.col and p.row < start.row]
            choose, key = max, (lambda p: p.row)
        elif direction is Direction.DOWN:
            candidates = [p for p in self._elements if p.col == start.col and p.row > start.row]
            choose, key = min, (lambda p: p.row)
        elif direction is Direction.LEFT:
            candidates = [p for p in self._elements if p.row == start.row and p.col < start.col]
            choose, key = max, (lambda p: p.col)
        else:
            candidates = [p for p in self._elements if p.row == start.row and p.col > start.col]
            choose, key = min, (lambda p: p.col)
        if not candidates:
            return None
        found = choose(candidates, key=key)
        return Element(self._elements[found], found)

    def _matching(self, element: T) -> Iterable[Element[T]]:
        return (Element(value, pos) for pos, value in self._elements.items() if value == element)

    def find(self, element: T) -> Element[T] | None:
        return next(iter(self._matching(element)), None)

    def find_all(self, element: T) -> list[Element[T]]:
        return list(self._matching(element))

    def contains(self, element: T) -> bool:
        return element in self._elements.values()

    def contains_position(self, pos: Position) -> bool:
        return pos in self._elements

    def is_empty(self) -> bool:
        return not self._elements

    def __len__(self) -> int:
        return len(self._elements)

    def __str__(self) -> str:
        if not self._elements:
            return "[]"
        return "\n".join(
            "".join(
                str(self._elements[Position(row, col)])
                if Position(row, col) in self._elements
                else "."
                for col in range(self.width())
            )
            for row in range(self.height())
        )