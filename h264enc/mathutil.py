"""Numeric helpers shared by the colour and YUV code."""

from __future__ import annotations

from collections.abc import Iterable
from numbers import Integral
from typing import TypeVar

T = TypeVar("T", int, float)


def clamp(value: T, min_value: T, max_value: T) -> T:
    """Limit ``value`` to the closed range ``[min_value, max_value]``."""
    if value < min_value:
        return min_value
    if value > max_value:
        return max_value
    return value


def average(values: Iterable[int | float]) -> int | float:
    """Return the mean of ``values``.

    For integers the mean is rounded by adding one half and truncating
    toward zero; for other numbers it is returned unrounded.
    """
    items = list(values)
    if not items:
        raise ValueError("average of an empty sequence")
    total = sum(items)
    if all(isinstance(item, Integral) for item in items):
        return int(total / len(items) + 0.5)
    return total / len(items)


def right_shift(value: int, bits: int) -> int:
    """Shift ``value`` right by ``bits``, rounding to nearest."""
    if bits < 1:
        raise ValueError(f"bits must be at least 1, got {bits}")
    return (value + (1 << (bits - 1))) >> bits