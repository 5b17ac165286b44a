"""
tensorshape - shape and rank bookkeeping for nested numeric arrays.

This package provides a rank-tagged Shape type, shape inference from nested
data, element counting, rank conversion and bounded row-major iteration.
"""

# --- Re-export Core Components ---

# Shape model
from .shape import (
    Rank,
    Shape,
    ShapeError,
    infer_shape,
    shape_length,
    to_shape,
    shape_to_1d,
    shape_to_2d,
    shape_to_3d,
    shape_to_4d,
)

# Iteration
from .iterate import iterate_1d, iterate_2d, iterate_3d, iterate_4d

# Reactive value cell
from .signals import Signal, create_signal

# --- Expose Submodules (`utils`) ---
from . import utils

# --- Version Information ---
# Try to get version from package metadata if installed
try:
    from importlib.metadata import PackageNotFoundError, version
    __version__ = version("tensorshape")
except PackageNotFoundError:
    # Not installed; should match version in setup.py
    __version__ = "0.1.0"

# --- Clean up namespace ---
del PackageNotFoundError
del version

# --- Define what `from tensorshape import *` imports ---
__all__ = [
    # Core
    "Rank",
    "Shape",
    "ShapeError",
    "__version__",
    # Shape operations
    "infer_shape",
    "shape_length",
    "to_shape",
    "shape_to_1d",
    "shape_to_2d",
    "shape_to_3d",
    "shape_to_4d",
    # Iteration
    "iterate_1d",
    "iterate_2d",
    "iterate_3d",
    "iterate_4d",
    # Signals
    "Signal",
    "create_signal",
    # Submodules
    "utils",
]
