"""Following the loop of pipes that passes through the start tile."""

from __future__ import annotations

from collections.abc import Sequence

Position = tuple[int, int]

_STEPS = {"N": (-1, 0), "S": (1, 0), "W": (0, -1), "E": (0, 1)}

# For each pipe: if the first exit is where we came from, leave by the second.
_PIPES = {
    "|": ("N", "S"),
    "-": ("W", "E"),
    "F": ("E", "S"),
    "L": ("N", "E"),
    "7": ("W", "S"),
    "J": ("N", "W"),
}


def _move(position: Position, direction: str) -> Position:
    d_row, d_col = _STEPS[direction]
    return position[0] + d_row, position[1] + d_col


def _tile(grid: Sequence[str], position: Position) -> str:
    row, col = position
    if not (0 <= row < len(grid) and 0 <= col < len(grid[row])):
        raise ValueError(f"position {position} is outside the grid")
    return grid[row][col]


def parse_grid(text: str) -> list[str]:
    """Split the maze text into its non-empty rows."""
    return [line for line in text.splitlines() if line]


def find_start(grid: Sequence[str]) -> Position:
    """Return the position of the ``S`` tile."""
    for row, line in enumerate(grid):
        col = line.find("S")
        if col >= 0:
            return row, col
    raise ValueError("the grid has no start tile")


def next_tile(grid: Sequence[str], previous: Position, current: Position) -> Position:
    """Return the tile reached by leaving ``current`` away from ``previous``."""
    tile = _tile(grid, current)
    try:
        first, second = _PIPES[tile]
    except KeyError:
        raise ValueError(f"no pipe at {current}: {tile!r}") from None
    ahead = _move(current, first)
    return _move(current, second) if ahead == previous else ahead


def trace_loop(
    grid: Sequence[str],
    start: Position | None = None,
    first: Position | None = None,
) -> list[Position]:
    """Return the loop's tiles in order, beginning with the start tile.

    ``start`` defaults to the ``S`` tile and ``first`` to the tile north of it.
    """
    if start is None:
        start = find_start(grid)
    if first is None:
        first = _move(start, "N")
    limit = sum(len(line) for line in grid)
    loop = [start]
    previous, current = start, first
    while _tile(grid, current) != "S":
        if len(loop) >= limit:
            raise ValueError("the path never returns to the start")
        loop.append(current)
        previous, current = current, next_tile(grid, previous, current)
    return loop


def farthest_distance(
    grid: Sequence[str],
    start: Position | None = None,
    first: Position | None = None,
) -> int:
    """Return the number of steps to the point of the loop farthest from start."""
    return len(trace_loop(grid, start, first)) // 2


def mark_loop(
    grid: Sequence[str],
    start: Position | None = None,
    first: Position | None = None,
) -> list[str]:
    """Return a copy of the grid with every loop tile replaced by ``X``."""
    on_loop = set(trace_loop(grid, start, first))
    return [
        "".join("X" if (row, col) in on_loop else char for col, char in enumerate(line))
        for row, line in enumerate(grid)
    ]