#!/usr/bin/env python
"""
Simple shape walkthrough using tensorshape
This example infers the shape of a nested batch, flattens it to a matrix
and visits every cell in row-major order.
"""

import numpy as np
import tensorshape as ts

def main():
    """Infer, convert and iterate the shape of a small image batch"""
    print("tensorshape Walkthrough - Image Batch")

    # Two 2x3 single-channel images
    batch = [
        [[[0.0], [0.1], [0.2]], [[0.3], [0.4], [0.5]]],
        [[[1.0], [1.1], [1.2]], [[1.3], [1.4], [1.5]]],
    ]

    shape = ts.infer_shape(batch)
    print(f"\nInferred shape: {shape} ({ts.shape_length(shape)} elements)")

    # Collapse to (rows, channels) so each pixel is one row
    matrix = ts.shape_to_2d(shape)
    print(f"As a matrix: {matrix}")

    # Pad a vector up to rank 4
    print(f"Vector (3,) as rank 4: {ts.shape_to_4d([3])}")

    # Visit every cell of the matrix
    flat = np.asarray(batch).reshape(matrix)
    print("\nCells (row, channel) -> value:")
    ts.iterate_2d(matrix, lambda i, j: print(f"{i}, {j} -> {flat[i, j]:.1f}"))

    return 0

if __name__ == "__main__":
    main()
