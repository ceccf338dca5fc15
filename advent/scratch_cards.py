"""Scratchcards: matching numbers, points and won copies."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

_CARD = re.compile(r"Card\s+(\d+):([\d\s]*)\|([\d\s]*)")


@dataclass(frozen=True)
class Card:
    """A scratchcard: its number, the winning numbers and the numbers held."""

    id: int
    winning: tuple[int, ...]
    numbers: tuple[int, ...]

    def matches(self) -> int:
        """How many held numbers match a winning number."""
        return sum(self.winning.count(number) for number in self.numbers)

    def points(self) -> int:
        """One point for the first match, doubled for each further match."""
        matches = self.matches()
        return 2 ** (matches - 1) if matches else 0


def parse_card(line: str) -> Card:
    """Parse a line such as ``Card 1: 41 48 | 83 86 17``."""
    match = _CARD.fullmatch(line.strip())
    if match is None:
        raise ValueError(f"not a scratchcard: {line!r}")
    winning = tuple(int(field) for field in match.group(2).split())
    numbers = tuple(int(field) for field in match.group(3).split())
    return Card(int(match.group(1)), winning, numbers)


def _cards(lines: Iterable[str]) -> list[Card]:
    return [parse_card(line) for line in lines if line.strip()]


def _copies(cards: list[Card]) -> list[int]:
    """How many instances of each card end up held, originals included."""
    copies = [1] * len(cards)
    for index, card in enumerate(cards):
        last = min(index + card.matches(), len(cards) - 1)
        for follower in range(index + 1, last + 1):
            copies[follower] += copies[index]
    return copies


def total_points(lines: Iterable[str]) -> int:
    """Sum the points of every card."""
    return sum(card.points() for card in _cards(lines))


def total_cards(lines: Iterable[str]) -> int:
    """Count all cards held once each card wins copies of the cards after it."""
    return sum(_copies(_cards(lines)))


def total_copy_points(lines: Iterable[str]) -> int:
    """Sum the points of every card instance, copies included."""
    cards = _cards(lines)
    copies = _copies(cards)
    return sum(count * card.points() for count, card in zip(copies, cards))