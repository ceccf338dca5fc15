"""Word search: counting words along every line of a letter grid."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence

_CROSS_WORDS = {"MAS", "SAM"}


def _check_rectangular(grid: Sequence[str]) -> int:
    widths = {len(row) for row in grid}
    if len(widths) > 1:
        raise ValueError("all rows of the grid must have the same length")
    return widths.pop() if widths else 0


def _all_lines(grid: Sequence[str]) -> list[str]:
    """Rows, columns, and both sets of diagonals of the grid."""
    width = _check_rectangular(grid)
    columns = ["".join(row[col] for row in grid) for col in range(width)]
    falling: dict[int, list[str]] = defaultdict(list)
    rising: dict[int, list[str]] = defaultdict(list)
    for r, row in enumerate(grid):
        for c, char in enumerate(row):
            falling[c - r].append(char)
            rising[r + c].append(char)
    diagonals = ["".join(chars) for chars in (*falling.values(), *rising.values())]
    return [*grid, *columns, *diagonals]


def count_word(grid: Sequence[str], word: str = "XMAS") -> int:
    """Count ``word`` written forwards or backwards along any line of the grid."""
    if not word:
        raise ValueError("the word must not be empty")
    backwards = word[::-1]
    return sum(line.count(word) + line.count(backwards) for line in _all_lines(grid))


def count_x_mas(grid: Sequence[str]) -> int:
    """Count the ``A`` cells whose two diagonals both read MAS or SAM."""
    height = len(grid)
    width = _check_rectangular(grid)
    total = 0
    for r in range(1, height - 1):
        for c in range(1, width - 1):
            if grid[r][c] != "A":
                continue
            falling = grid[r - 1][c - 1] + "A" + grid[r + 1][c + 1]
            rising = grid[r - 1][c + 1] + "A" + grid[r + 1][c - 1]
            if falling in _CROSS_WORDS and rising in _CROSS_WORDS:
                total += 1
    return total