"""Games of cubes drawn from a bag: which are possible and how much power."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

COLORS = ("red", "green", "blue")

_GAME = re.compile(r"Game\s+(\d+):(.*)")


@dataclass
class Game:
    """A game record: its number and the cube counts of each reveal."""

    id: int
    reveals: tuple[dict[str, int], ...]

    def _most(self, color: str) -> int:
        return max((reveal.get(color, 0) for reveal in self.reveals), default=0)

    def is_possible(self, red: int = 12, green: int = 13, blue: int = 14) -> bool:
        """Whether a bag with these many cubes of each color could give this game."""
        limits = {"red": red, "green": green, "blue": blue}
        return all(self._most(color) <= limits[color] for color in COLORS)

    def power(self) -> int:
        """Product of the fewest cubes of each color that make the game possible."""
        return math.prod(self._most(color) for color in COLORS)


def parse_game(line: str) -> Game:
    """Parse a line such as ``Game 3: 2 red, 1 blue; 4 green``."""
    match = _GAME.fullmatch(line.strip())
    if match is None:
        raise ValueError(f"not a game record: {line!r}")
    reveals = []
    for part in match.group(2).split(";"):
        counts: dict[str, int] = {}
        for item in part.split(","):
            fields = item.split()
            if len(fields) != 2 or not fields[0].isdigit() or fields[1] not in COLORS:
                raise ValueError(f"bad cube count {item.strip()!r} in {line!r}")
            count, color = int(fields[0]), fields[1]
            counts[color] = counts.get(color, 0) + count
        reveals.append(counts)
    return Game(int(match.group(1)), tuple(reveals))


def _games(lines: Iterable[str]) -> Iterator[Game]:
    return (parse_game(line) for line in lines if line.strip())


def sum_possible(
    lines: Iterable[str], red: int = 12, green: int = 13, blue: int = 14
) -> int:
    """Sum the numbers of the games that the given bag makes possible."""
    return sum(game.id for game in _games(lines) if game.is_possible(red, green, blue))


def sum_power(lines: Iterable[str]) -> int:
    """Sum the power of every game."""
    return sum(game.power() for game in _games(lines))