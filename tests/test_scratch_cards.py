import pytest

from advent.scratch_cards import (
    parse_card,
    total_cards,
    total_copy_points,
    total_points,
)

EXAMPLE = "Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53"


def test_parse_card_fields():
    card = parse_card("Card  12: 1  2 | 3 4  5")
    assert card.id == 12
    assert card.winning == (1, 2)
    assert card.numbers == (3, 4, 5)


def test_example_matches_and_points():
    card = parse_card(EXAMPLE)
    assert card.matches() == 4
    assert card.points() == 8


def test_no_matches_scores_nothing():
    card = parse_card("Card 2: 1 2 3 | 4 5 6")
    assert card.matches() == 0
    assert card.points() == 0


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        parse_card("garbage line")


def test_total_points_sums_cards():
    lines = [EXAMPLE, "Card 2: 1 2 3 | 4 5 6", ""]
    assert total_points(lines) == parse_card(EXAMPLE).points()


def test_total_cards_without_matches_is_card_count():
    lines = ["Card 1: 1 | 2", "Card 2: 3 | 4", "Card 3: 5 | 6"]
    assert total_cards(lines) == len(lines)


def test_total_cards_never_below_card_count():
    lines = ["Card 1: 1 2 | 1 2", "Card 2: 3 | 3", "Card 3: 5 | 6"]
    assert total_cards(lines) > len(lines)


def test_copy_points_equal_points_when_no_copies_are_won():
    lines = ["Card 1: 1 | 2", "Card 2: 3 | 4", "Card 3: 5 7 | 5 7"]
    assert total_copy_points(lines) == total_points(lines)


def test_copy_points_grow_with_copies():
    lines = ["Card 1: 1 | 1", "Card 2: 3 | 3"]
    assert total_copy_points(lines) > total_points(lines)