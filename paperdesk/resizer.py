"""Scaling of sizes by a fractional factor."""

from __future__ import annotations

import math
from typing import Union

Size = Union[int, tuple[int, ...]]


def _round_half_away(number: float) -> int:
    magnitude = math.floor(abs(number) + 0.5)
    return magnitude if number >= 0 else -magnitude


def scale(value: Size, factor: float) -> Size:
    """Multiply a length, or each axis of a size tuple, by ``factor`` and round.

    A factor that is not positive leaves the value unchanged.
    """
    if isinstance(value, tuple):
        return tuple(scale(part, factor) for part in value)
    if factor <= 0:
        return value
    return _round_half_away(value * factor)


def double(value: Size) -> Size:
    """Scale a length or size tuple by two."""
    return scale(value, 2)