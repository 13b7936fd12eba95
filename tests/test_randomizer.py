import random

import pytest

from paperdesk.randomizer import (
    generate_document_number,
    generate_perc,
    rand_in_pool,
    rand_of_set,
    random_for_mistakes,
    stamp_degenerator,
    two_digit,
)


@pytest.fixture(autouse=True)
def _seeded():
    random.seed(1234)


def test_stamp_degenerator_never_returns_original():
    allowed = {-8, -7, -6, -5, 5, 7, 8}
    for _ in range(100):
        assert stamp_degenerator(6) in allowed


@pytest.mark.parametrize("stamp", [5, 6, 7, 8])
def test_stamp_degenerator_range(stamp):
    for _ in range(200):
        result = stamp_degenerator(stamp)
        assert result != stamp
        assert abs(result) in {5, 6, 7, 8}


@pytest.mark.parametrize("stamp", [0, 4, 9, -5])
def test_stamp_degenerator_rejects_unknown(stamp):
    with pytest.raises(ValueError):
        stamp_degenerator(stamp)


def test_two_digit():
    assert two_digit(7) == "07"
    assert two_digit(0) == "00"
    assert two_digit(12) == "12"
    assert two_digit(2019) == "2019"


def test_rand_in_pool_edges():
    assert rand_in_pool(5, 3) == 0
    assert rand_in_pool(4, 4) == 4
    values = {rand_in_pool(1, 10) for _ in range(500)}
    assert values == set(range(1, 11))


def test_generate_perc_bounds():
    assert all(generate_perc(100) for _ in range(50))
    assert not any(generate_perc(0) for _ in range(50))


def test_generate_perc_one_is_never_true():
    # rand_in_pool(1, 100) < 1 cannot hold
    assert not any(generate_perc(1) for _ in range(200))


def test_document_number_shape():
    for _ in range(50):
        number = generate_document_number()
        assert len(number) == 10
        assert number.isdigit()


def test_random_for_mistakes_sets():
    narrow = {random_for_mistakes(False) for _ in range(500)}
    wide = {random_for_mistakes(True) for _ in range(1000)}
    assert narrow == {2, 3, 4, 5, 8}
    assert wide == {2, 3, 4, 5, 7, 8, 11}


def test_rand_of_set():
    assert rand_of_set({"only"}) == "only"
    picks = {rand_of_set({"a", "b", "c"}) for _ in range(200)}
    assert picks == {"a", "b", "c"}
    with pytest.raises(ValueError):
        rand_of_set(set())