"""Camel Cards: ranking poker-like hands and totalling the winnings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

_FACES = {"A": 14, "K": 13, "Q": 12, "J": 11, "T": 10}


class HandType(IntEnum):
    """Hand strengths, weakest first."""

    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    FULL_HOUSE = 5
    FOUR_OF_A_KIND = 6
    FIVE_OF_A_KIND = 7


def hand_type(cards: str) -> HandType:
    """Classify five cards by how their labels repeat."""
    if len(cards) != 5:
        raise ValueError(f"a hand has five cards: {cards!r}")
    counts = sorted(Counter(cards).values(), reverse=True)
    if counts[0] == 5:
        return HandType.FIVE_OF_A_KIND
    if counts[0] == 4:
        return HandType.FOUR_OF_A_KIND
    if counts[:2] == [3, 2]:
        return HandType.FULL_HOUSE
    if counts[0] == 3:
        return HandType.THREE_OF_A_KIND
    if counts[:2] == [2, 2]:
        return HandType.TWO_PAIR
    if counts[0] == 2:
        return HandType.ONE_PAIR
    return HandType.HIGH_CARD


def card_value(card: str, jokers: bool = False) -> int:
    """The strength of one card; with ``jokers`` the J is the weakest card."""
    if card == "J" and jokers:
        return 1
    if card in _FACES:
        return _FACES[card]
    if len(card) == 1 and card in "23456789":
        return int(card)
    raise ValueError(f"unknown card {card!r}")


@dataclass(frozen=True)
class Hand:
    """Five cards and the bid placed on them."""

    cards: str
    bid: int
    jokers: bool = False

    def sort_key(self) -> tuple[HandType, tuple[int, ...]]:
        """Key ordering hands from weakest to strongest."""
        values = tuple(card_value(card, self.jokers) for card in self.cards)
        return hand_type(self.cards), values


def parse_hands(lines: Iterable[str], jokers: bool = False) -> list[Hand]:
    """Parse lines such as ``32T3K 765`` into hands."""
    hands = []
    for line in lines:
        fields = line.split()
        if not fields:
            continue
        if len(fields) != 2 or not fields[1].isdigit():
            raise ValueError(f"not a hand and bid: {line!r}")
        hand = Hand(fields[0], int(fields[1]), jokers)
        hand.sort_key()
        hands.append(hand)
    return hands


def total_winnings(lines: Iterable[str], jokers: bool = False) -> int:
    """Sum each bid times its hand's rank; equal hands rank earlier ones higher."""
    hands = parse_hands(lines, jokers)
    ordered = sorted(
        enumerate(hands), key=lambda pair: (pair[1].sort_key(), -pair[0])
    )
    return sum(rank * hand.bid for rank, (_, hand) in enumerate(ordered, start=1))