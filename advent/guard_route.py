"""A guard patrolling a lab: step forward, turn right at obstacles."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

Position = tuple[int, int]

OBSTACLE = "#"


class Direction(Enum):
    """The way the guard faces, as a row and column step."""

    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    def turn_right(self) -> Direction:
        """The direction a quarter turn clockwise."""
        order = list(Direction)
        return order[(order.index(self) + 1) % len(order)]

    def ahead(self, position: Position) -> Position:
        """The position one step this way from ``position``."""
        return position[0] + self.value[0], position[1] + self.value[1]


_ARROWS = {
    "^": Direction.NORTH,
    ">": Direction.EAST,
    "v": Direction.SOUTH,
    "<": Direction.WEST,
}


def find_guard(grid: Sequence[str]) -> tuple[Position, Direction]:
    """The guard's starting position and the direction the arrow points."""
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            if char in _ARROWS:
                return (row, col), _ARROWS[char]
    raise ValueError("the map has no guard")


def _inside(grid: Sequence[str], position: Position) -> bool:
    row, col = position
    return 0 <= row < len(grid) and 0 <= col < len(grid[row])


def walk(
    grid: Sequence[str],
    start: Position | None = None,
    direction: Direction | None = None,
) -> list[Position]:
    """Positions the guard stands on, in order, until leaving the map.

    Raises ``ValueError`` if the guard would patrol in a loop forever.
    """
    if start is None or direction is None:
        found, facing = find_guard(grid)
        start = found if start is None else start
        direction = facing if direction is None else direction
    if not _inside(grid, start):
        raise ValueError(f"start {start} is outside the map")
    position = start
    path = [position]
    seen: set[tuple[Position, Direction]] = set()
    while True:
        state = (position, direction)
        if state in seen:
            raise ValueError("the guard walks in a loop")
        seen.add(state)
        ahead = direction.ahead(position)
        if not _inside(grid, ahead):
            return path
        if grid[ahead[0]][ahead[1]] == OBSTACLE:
            direction = direction.turn_right()
        else:
            position = ahead
            path.append(position)


def visited_count(grid: Sequence[str]) -> int:
    """Number of distinct positions the guard visits before leaving."""
    return len(set(walk(grid)))