import pytest

from advent.mirage import next_value, previous_value, sum_next, sum_previous

SQUARES = [n * n for n in range(8)]
CUBES = [n**3 - 2 * n for n in range(-3, 7)]


def test_constant_sequence_continues():
    assert next_value([5, 5, 5]) == 5
    assert previous_value([5, 5, 5]) == 5


@pytest.mark.parametrize("series", [SQUARES, CUBES])
def test_next_value_recovers_polynomial(series):
    assert next_value(series[:-1]) == series[-1]


@pytest.mark.parametrize("series", [SQUARES, CUBES])
def test_previous_value_recovers_polynomial(series):
    assert previous_value(series[1:]) == series[0]


def test_zeros_extrapolate_to_zero():
    assert next_value([0, 0, 0]) == 0


def test_empty_history_rejected():
    with pytest.raises(ValueError):
        next_value([])


def test_sums_over_lines():
    lines = [" ".join(map(str, SQUARES[:-1])), "", " ".join(map(str, CUBES[:-1]))]
    assert sum_next(lines) == SQUARES[-1] + CUBES[-1]


def test_sum_previous_over_lines():
    lines = [" ".join(map(str, SQUARES[1:])), " ".join(map(str, CUBES[1:]))]
    assert sum_previous(lines) == SQUARES[0] + CUBES[0]


def test_bad_line_rejected():
    with pytest.raises(ValueError):
        sum_next(["1 two 3"])