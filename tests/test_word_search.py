import pytest

from advent.word_search import count_word, count_x_mas

EXAMPLE = [
    "MMMSXXMASM",
    "MSAMXMSMSA",
    "AMXSXMAAMM",
    "MSAMASMSMX",
    "XMASAMXAMM",
    "XXAMMXXAMA",
    "SMSMSASXSS",
    "SAXAMASAAA",
    "MAMMMXMMMM",
    "MXMXAXMASX",
]


def _transpose(grid):
    return ["".join(row[c] for row in grid) for c in range(len(grid[0]))]


def test_example_xmas():
    assert count_word(EXAMPLE) == 18


def test_example_x_mas():
    assert count_x_mas(EXAMPLE) == 9


def test_single_word():
    assert count_word(["XMAS"]) == 1


def test_reversed_word_counts_the_same():
    assert count_word(EXAMPLE, "SAMX") == count_word(EXAMPLE, "XMAS")


def test_transpose_keeps_count():
    assert count_word(_transpose(EXAMPLE)) == count_word(EXAMPLE)


def test_flip_keeps_x_mas_count():
    assert count_x_mas(EXAMPLE[::-1]) == count_x_mas(EXAMPLE)
    assert count_x_mas([row[::-1] for row in EXAMPLE]) == count_x_mas(EXAMPLE)


def test_vertical_word_found_in_column():
    grid = ["X...", "M...", "A...", "S..."]
    assert count_word(grid) == count_word(_transpose(grid))
    assert count_word(grid) == count_word(["XMAS", "....", "....", "...."])


def test_ragged_grid_raises():
    with pytest.raises(ValueError):
        count_word(["XMAS", "XM"])


def test_empty_word_raises():
    with pytest.raises(ValueError):
        count_word(EXAMPLE, "")