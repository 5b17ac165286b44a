"""
Shape and rank model for nested numeric arrays.

A shape is an ordered tuple of dimension sizes tagged with a rank between
1 and 6. This module infers shapes from nested data, counts elements, and
converts shapes between ranks by padding or collapsing leading dimensions.
"""

import enum
import logging
import operator
from typing import Any, Sequence

import numpy as np

logger = logging.getLogger(__name__)


class ShapeError(ValueError):
    """Raised when a shape does not fit the rank it is used with."""


class Rank(enum.IntEnum):
    """Supported ranks. There is no rank 0 (scalar) and nothing above 6."""

    R1 = 1
    R2 = 2
    R3 = 3
    R4 = 4
    R5 = 5
    R6 = 6


class Shape(tuple):
    """
    Immutable tuple of dimension sizes whose length is bound to its rank.

    Args:
        dims (Sequence[int]): Dimension sizes, outermost first.
        rank (int, optional): Expected rank. If given, ``len(dims)`` must match it.

    Raises:
        ShapeError: If the length is outside 1..6 or differs from ``rank``.
        TypeError: If a dimension is not an integer (e.g. ``2.5``).
    """

    def __new__(cls, dims: Sequence[int], rank: int | None = None) -> "Shape":
        dims = tuple(operator.index(d) for d in dims)
        if not Rank.R1 <= len(dims) <= Rank.R6:
            raise ShapeError(f"Shape must have between 1 and 6 dimensions, got {len(dims)}")
        if rank is not None and len(dims) != Rank(rank):
            raise ShapeError(f"Expected a rank {int(rank)} shape, got {len(dims)} dimensions: {dims}")
        return super().__new__(cls, dims)

    @property
    def rank(self) -> Rank:
        return Rank(len(self))

    @property
    def size(self) -> int:
        """Total number of elements described by this shape."""
        return shape_length(self)

    def __repr__(self) -> str:
        return f"Shape({tuple(self)!r})"


def _is_sequence(value: Any) -> bool:
    if isinstance(value, np.ndarray):
        return value.ndim > 0
    return isinstance(value, (list, tuple))


def infer_shape(nested: Any) -> tuple[int, ...]:
    """
    Infer the shape of a nested array.

    Only the first element at each level is followed, so ragged input is not
    detected. An empty sequence contributes a ``0`` and ends the walk.

    Example:
        >>> infer_shape([[[[1, 2], [3, 4]], [[5, 6], [7, 8]]]])
        (1, 2, 2, 2)
    """
    shape = []
    elem = nested
    while _is_sequence(elem):
        shape.append(len(elem))
        if len(elem) == 0:
            break
        elem = elem[0]
    return tuple(shape)


def shape_length(shape: Sequence[int]) -> int:
    """
    Return the number of elements of a shape.

    Example:
        >>> shape_length([1, 2, 3, 4])
        24
    """
    length = 1
    for dim in shape:
        length *= dim
    return length


def to_shape(shape: Sequence[int], rank: int) -> Shape:
    """
    Convert a shape to the given rank.

    Expanding right-aligns the source and pads the front with ones. Collapsing
    keeps the innermost ``rank - 1`` dimensions and multiplies every remaining
    leading dimension into the first one, so the element count is unchanged.

    Example:
        >>> to_shape([1, 2, 3], 1)
        Shape((6,))
        >>> to_shape([1, 2, 3], 2)
        Shape((2, 3))
        >>> to_shape([1, 2, 3], 4)
        Shape((1, 1, 2, 3))

    Raises:
        ShapeError: If ``shape`` is empty.
        ValueError: If ``rank`` is not between 1 and 6.
    """
    rank = Rank(rank)
    n = len(shape)
    if n == 0:
        raise ShapeError("Cannot convert an empty shape")

    if rank == n:
        if isinstance(shape, Shape):
            return shape
        return Shape(shape, rank)

    res = [1] * rank
    if rank < n:
        logger.debug(f"Collapsing shape {tuple(shape)} to rank {int(rank)}")
        for i in range(1, n + 1):
            if i < rank:
                res[rank - i] = shape[n - i]
            else:
                res[0] *= shape[n - i]
    else:
        logger.debug(f"Expanding shape {tuple(shape)} to rank {int(rank)}")
        for i in range(1, n + 1):
            res[rank - i] = shape[n - i]
    return Shape(res, rank)


def shape_to_1d(shape: Sequence[int]) -> Shape:
    """Convert a shape to rank 1, e.g. ``(1, 2, 3) -> (6,)``."""
    return to_shape(shape, Rank.R1)


def shape_to_2d(shape: Sequence[int]) -> Shape:
    """Convert a shape to rank 2, e.g. ``(1, 2, 3) -> (2, 3)``."""
    return to_shape(shape, Rank.R2)


def shape_to_3d(shape: Sequence[int]) -> Shape:
    return to_shape(shape, Rank.R3)


def shape_to_4d(shape: Sequence[int]) -> Shape:
    """Convert a shape to rank 4, e.g. ``(1, 2, 3) -> (1, 1, 2, 3)``."""
    return to_shape(shape, Rank.R4)


__all__ = [
    "Rank",
    "Shape",
    "ShapeError",
    "infer_shape",
    "shape_length",
    "to_shape",
    "shape_to_1d",
    "shape_to_2d",
    "shape_to_3d",
    "shape_to_4d",
]
