# advent2024

Solvers for days 3, 4 and 5 of Advent of Code 2024, together with a small
sparse-grid helper library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command-line use

Each solved day has its own command. Give it the path of your puzzle input,
or `-` or nothing at all to read standard input, and it prints the answers:

```
advent2024-day03 input.txt
advent2024-day04 input.txt
advent2024-day05 input.txt
```

| Command            | Prints                                                        |
|--------------------|---------------------------------------------------------------|
| `advent2024-day03` | Sum of the `mul(a,b)` instructions enabled in corrupt memory  |
| `advent2024-day04` | Count of `XMAS` words, then count of `X-MAS` crosses          |
| `advent2024-day05` | Sum of the middle pages of correctly ordered updates          |

## Library use

The solvers can be called directly with the puzzle text:

```python
from advent2024 import day03, day04, day05

text = open("input.txt").read()

program = day03.parse_program(text)
print(program.run())

print(day04.count_xmas(text), day04.count_x_mas(text))

befores, afters, updates = day05.parse_input(text)
print([day05.is_valid_update(u, befores, afters) for u in updates])
print(day05.sum_valid_middle_pages(text))
```

`day03.parse_program` returns a `Program` made of `ActiveSegment` values,
each holding `MulInstruction` values; every one of them has a `run()` method
that gives its sum or product. A segment counts only if it is closed by
`don't()`; if no such segment exists, `parse_program` raises `ValueError`.

`day04` expects a square grid and raises `ValueError` otherwise.
`day05.parse_input` raises `ValueError` when the blank line between rules and
updates is missing or a rule lacks its `|`.

### Sparse grid

`advent2024.grid` offers a `SparseGrid` that stores values at
`Position(row, col)` and tracks its own width and height:

```python
from advent2024.grid import Direction, Position, SparseGrid

grid = SparseGrid()
grid.put(Position(0, 0), 1)
grid.put(Position(0, 3), 2)
grid.put(Position(2, 0), 4)

grid.width(), grid.height()                              # (4, 3)
grid.next_in_direction(Position(0, 0), Direction.RIGHT)  # element 2 at (0,3)
grid.neighbour(Position(0, 0), Direction.DOWN)           # None, (1,0) is empty
print(grid)
```

Lookups (`get`, `pop`, `neighbour`, `next_in_direction`, `find`) return
`Element` values that carry both the stored value and its position; they
return `None` where nothing is stored. `find_all` returns a list,
`contains` and `contains_position` answer membership questions, and
`Direction` and `Orientation` provide `reverse`, `flip` and the horizontal
and vertical tests.

## What is not included

The package has no solvers for days 1, 2 or 6 (the two location lists, the
reactor safety reports and the patrolling guard) and no commands for them.