"""
tensorshape Utilities Submodule (`tensorshape.utils`)

Scalar math helpers and an in-place element swap, used alongside the shape
model (e.g. clamping indices produced while iterating a shape).
"""

import math
import random as _random
from typing import MutableSequence, TypeVar

T = TypeVar("T")


def clamp(value: float, min_value: float, max_value: float) -> float:
    """
    Clamp a value between a minimum and a maximum.

    Example:
        >>> clamp(5, 0, 10), clamp(-5, 0, 10), clamp(15, 0, 10)
        (5, 0, 10)
    """
    return max(min_value, min(max_value, value))


def factorial(n: int) -> int:
    """
    Factorial of a non-negative integer.

    Raises:
        ValueError: If ``n`` is negative.
    """
    if n < 0:
        raise ValueError(f"factorial() is not defined for negative values, got {n}")
    return 1 if n == 0 else n * factorial(n - 1)


def random(min_value: float = 0, max_value: float = 1) -> float:
    """Uniform random float in ``[min_value, max_value)``; defaults to ``[0, 1)``."""
    return _random.random() * (max_value - min_value) + min_value


def average(*numbers: float) -> float:
    """
    Arithmetic mean of the given numbers.

    Example:
        >>> average(1, 2, 3, 4, 5)
        3.0
    """
    if not numbers:
        raise ValueError("average() requires at least one number")
    return sum(numbers) / len(numbers)


def bezier(t: float, p0: float, p1: float, p2: float, p3: float) -> float:
    """
    Cubic Bezier curve evaluated at ``t``.

    See https://en.wikipedia.org/wiki/B%C3%A9zier_curve
    """
    return (
        math.pow(1 - t, 3) * p0
        + 3 * math.pow(1 - t, 2) * t * p1
        + 3 * (1 - t) * math.pow(t, 2) * p2
        + math.pow(t, 3) * p3
    )


def fuzzy_equals(a: float, b: float, epsilon: float = 0.0001) -> bool:
    """True if ``a`` and ``b`` differ by less than ``epsilon``."""
    return abs(a - b) < epsilon


def swap(sequence: MutableSequence[T], a: int, b: int) -> None:
    """Exchange the elements at indices ``a`` and ``b`` in place."""
    sequence[a], sequence[b] = sequence[b], sequence[a]


__all__ = [
    "clamp",
    "factorial",
    "random",
    "average",
    "bezier",
    "fuzzy_equals",
    "swap",
]
