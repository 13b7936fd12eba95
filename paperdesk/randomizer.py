"""Random helpers shared by the document and mistake generators."""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")

_STAMPS = frozenset({5, 6, 7, 8})
_STAMP_VARIANTS = frozenset({-8, -7, -6, -5, 5, 6, 7, 8})


def two_digit(value: int) -> str:
    """Render a number, padding single digits with a leading zero."""
    if -9 <= value <= 9:
        return f"0{value}"
    return str(value)


def random_for_mistakes(extended: bool) -> int:
    """Draw a mistake code.

    With ``extended`` false the code comes from {2, 3, 4, 5, 8};
    with ``extended`` true it comes from {2, 3, 4, 5, 7, 8, 11}.
    """
    if not extended:
        code = random.randrange(5)
        return {0: 5, 1: 8}.get(code, code)
    code = random.randrange(7)
    return {0: 11, 1: 7, 6: 8}.get(code, code)


def rand_in_pool(begin: int, end: int) -> int:
    """Return a random integer in ``[begin, end]``, or 0 if the range is empty."""
    if end < begin:
        return 0
    if end == begin:
        return begin
    return random.randint(begin, end)


def generate_perc(chance: int) -> bool:
    """Return True with roughly ``chance`` percent probability."""
    if chance > 99:
        return True
    if chance < 1:
        return False
    return rand_in_pool(1, 100) < chance


def generate_document_number() -> str:
    """Return a ten-digit document number, which may start with zero."""
    return "".join(str(random.randrange(10)) for _ in range(10))


def stamp_degenerator(stamp: int) -> int:
    """Turn a correct stamp id (5..8) into a wrong one from ±{5, 6, 7, 8}."""
    if stamp not in _STAMPS:
        raise ValueError(f"stamp must be one of 5, 6, 7, 8, not {stamp!r}")
    if random.randrange(4):
        return -stamp
    if 56 % stamp == 0:
        return random.choice((5, 6)) * random.choice((-1, 1))
    return rand_of_set(_STAMP_VARIANTS - {stamp, -stamp})


def rand_of_set(items: Iterable[T]) -> T:
    """Pick a random element of a non-empty collection."""
    pool = list(items)
    if not pool:
        raise ValueError("cannot pick from an empty collection")
    return random.choice(pool)