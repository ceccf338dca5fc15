from collections import Counter

import pytest

from advent.print_queue import (
    ordered_middle_sum,
    parse_rules,
    parse_update,
    reordered_middle_sum,
)

RULES = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13"""

UPDATES = """75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47"""


@pytest.fixture
def rules():
    return parse_rules(RULES.splitlines())


@pytest.fixture
def updates():
    return [parse_update(line) for line in UPDATES.splitlines()]


def test_example_ordered_sum(rules, updates):
    assert ordered_middle_sum(rules, updates) == 143


def test_example_reordered_sum(rules, updates):
    assert reordered_middle_sum(rules, updates) == 123


def test_first_update_is_ordered(rules, updates):
    assert rules.is_ordered(updates[0]) is True
    assert rules.is_ordered(updates[0][::-1]) is False


def test_reorder_gives_ordered_permutation(rules, updates):
    for pages in updates:
        fixed = rules.reorder(pages)
        assert Counter(fixed) == Counter(pages)
        assert rules.is_ordered(fixed)


def test_reorder_keeps_ordered_update(rules, updates):
    assert rules.reorder(updates[0]) == updates[0]


def test_parse_update_values():
    assert parse_update("75,47,61") == [75, 47, 61]


def test_bad_rule_raises():
    with pytest.raises(ValueError):
        parse_rules(["47-53"])


def test_bad_update_raises():
    with pytest.raises(ValueError):
        parse_update("75,,47")


def test_empty_update_middle_raises(rules):
    with pytest.raises(ValueError):
        ordered_middle_sum(rules, [[]])