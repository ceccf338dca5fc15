import pytest

from advent.memory import enabled_at, enabled_products, total_products

EXAMPLE = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_example_products():
    assert enabled_products(EXAMPLE) == [2 * 4, 8 * 5]


def test_example_total():
    assert total_products([EXAMPLE]) == 48


def test_enabled_without_markers():
    assert enabled_at(5, "abcdefmul(1,2)") is True


def test_disabled_after_dont():
    line = "don't()mul(1,2)"
    assert enabled_at(line.index("mul"), line) is False


def test_reenabled_after_do():
    line = "don't()do()mul(3,4)"
    assert enabled_at(line.index("mul"), line) is True
    assert enabled_products(line) == [3 * 4]


def test_each_line_starts_enabled():
    assert total_products(["don't()", "mul(2,3)"]) == 2 * 3


def test_malformed_instructions_ignored():
    assert enabled_products("mul(1234,5) mul (2,3) mul(2, 3)") == []


def test_index_outside_line_raises():
    with pytest.raises(ValueError):
        enabled_at(10, "short")