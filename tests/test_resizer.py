import pytest

from paperdesk.resizer import double, scale


def test_half_rounds_away_from_zero():
    assert scale(3, 2.5) == 8


@pytest.mark.parametrize("factor", [0, -1, -0.5])
def test_non_positive_factor_keeps_value(factor):
    assert scale(37, factor) == 37
    assert scale((12, 9), factor) == (12, 9)


@pytest.mark.parametrize("value", [0, 1, 17, 250])
def test_identity_factor(value):
    assert scale(value, 1) == value


def test_size_tuple_scaled_per_axis():
    assert scale((4, 6), 0.5) == (2, 3)


@pytest.mark.parametrize("value", [1, 5, 123])
def test_double_matches_scale_by_two(value):
    assert double(value) == scale(value, 2)
    assert double(value) == value + value


def test_double_size_tuple():
    assert double((10, 20)) == (20, 40)