"""
Tests for tensorshape.iterate functionality.
"""

import unittest
import numpy as np
import tensorshape as ts
from tensorshape import ShapeError

class TestIterate(unittest.TestCase):

    def collect(self, iterate, shape):
        seen = []
        iterate(shape, lambda *index: seen.append(index))
        return seen

    def test_iterate_1d(self):
        seen = []
        ts.iterate_1d(5, seen.append)
        self.assertEqual(seen, [0, 1, 2, 3, 4])

    def test_iterate_1d_empty(self):
        seen = []
        ts.iterate_1d(0, seen.append)
        ts.iterate_1d(-3, seen.append)
        self.assertEqual(seen, [])

    def test_iterate_2d_row_major(self):
        seen = self.collect(ts.iterate_2d, [2, 3])
        self.assertEqual(seen, [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)])

    def test_iterate_3d_example(self):
        seen = self.collect(ts.iterate_3d, [2, 2, 2])
        self.assertEqual(seen[:3], [(0, 0, 0), (0, 0, 1), (0, 1, 0)])
        self.assertEqual(seen[-1], (1, 1, 1))
        self.assertEqual(len(seen), 8)

    def test_matches_numpy_ndindex(self):
        cases = [
            (ts.iterate_2d, (3, 4)),
            (ts.iterate_3d, (2, 3, 2)),
            (ts.iterate_4d, (2, 1, 3, 2)),
            (ts.iterate_4d, (2, 2, 2, 2)),
        ]
        for iterate, shape in cases:
            with self.subTest(shape=shape):
                self.assertEqual(self.collect(iterate, shape), list(np.ndindex(*shape)))

    def test_call_count_is_shape_length(self):
        for iterate, shape in [(ts.iterate_2d, [4, 5]), (ts.iterate_3d, [3, 1, 2]), (ts.iterate_4d, [1, 2, 3, 4])]:
            self.assertEqual(len(self.collect(iterate, shape)), ts.shape_length(shape))

    def test_zero_dimension_yields_nothing(self):
        self.assertEqual(self.collect(ts.iterate_2d, [3, 0]), [])
        self.assertEqual(self.collect(ts.iterate_4d, [0, 2, 2, 2]), [])

    def test_accepts_converted_shapes(self):
        shape = ts.shape_to_2d([2, 2, 3])
        self.assertEqual(len(self.collect(ts.iterate_2d, shape)), 12)

    def test_fills_array_in_order(self):
        arr = np.zeros((2, 3, 4), dtype=int)
        counter = iter(range(arr.size))

        def fill(i, j, k):
            arr[i, j, k] = next(counter)

        ts.iterate_3d(arr.shape, fill)
        np.testing.assert_array_equal(arr, np.arange(24).reshape(2, 3, 4))

    def test_callback_return_value_ignored(self):
        seen = []
        ts.iterate_2d([2, 2], lambda i, j: seen.append((i, j)) or False)
        self.assertEqual(len(seen), 4)

    def test_callback_exception_propagates(self):
        def boom(i, j):
            if (i, j) == (1, 0):
                raise RuntimeError("stop")

        with self.assertRaises(RuntimeError):
            ts.iterate_2d([2, 2], boom)

    def test_wrong_rank_rejected(self):
        with self.assertRaises(ShapeError):
            ts.iterate_2d([2, 2, 2], lambda i, j: None)
        with self.assertRaises(ShapeError):
            ts.iterate_3d([2, 2], lambda i, j, k: None)
        with self.assertRaises(ShapeError):
            ts.iterate_4d([2, 2, 2, 2, 2], lambda i, j, k, l: None)

if __name__ == '__main__':
    unittest.main()
