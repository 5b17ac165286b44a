"""
Bounded row-major iteration over shapes of rank 1 to 4.

Every higher-rank iterator is built from ``iterate_1d``: each outer step runs
a full inner iteration before advancing, so the last axis varies fastest.
Ranks 5 and 6 have no iterator here; compose ``iterate_4d`` with extra
loops when they are needed.
"""

from typing import Callable, Sequence

from .shape import Rank, Shape


def iterate_1d(length: int, callback: Callable[[int], None]) -> None:
    """
    Call ``callback(i)`` for every ``i`` in ``range(length)``.

    Example:
        >>> iterate_1d(3, print)
        0
        1
        2
    """
    for i in range(length):
        callback(i)


def iterate_2d(shape: Sequence[int], callback: Callable[[int, int], None]) -> None:
    """
    Call ``callback(i, j)`` for every index pair of a rank 2 shape.

    Example:
        >>> iterate_2d([2, 2], lambda i, j: print(i, j))
        0 0
        0 1
        1 0
        1 1
    """
    rows, cols = Shape(shape, Rank.R2)
    iterate_1d(rows, lambda i: iterate_1d(cols, lambda j: callback(i, j)))


def iterate_3d(shape: Sequence[int], callback: Callable[[int, int, int], None]) -> None:
    """Call ``callback(i, j, k)`` for every index triple of a rank 3 shape."""
    d0, d1, d2 = Shape(shape, Rank.R3)
    iterate_1d(
        d0,
        lambda i: iterate_1d(
            d1,
            lambda j: iterate_1d(d2, lambda k: callback(i, j, k)),
        ),
    )


def iterate_4d(shape: Sequence[int], callback: Callable[[int, int, int, int], None]) -> None:
    """Call ``callback(i, j, k, l)`` for every index of a rank 4 shape."""
    d0, d1, d2, d3 = Shape(shape, Rank.R4)
    iterate_1d(
        d0,
        lambda i: iterate_1d(
            d1,
            lambda j: iterate_1d(
                d2,
                lambda k: iterate_1d(d3, lambda l: callback(i, j, k, l)),
            ),
        ),
    )


__all__ = [
    "iterate_1d",
    "iterate_2d",
    "iterate_3d",
    "iterate_4d",
]
