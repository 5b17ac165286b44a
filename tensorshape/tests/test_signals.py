"""
Tests for tensorshape.signals.
"""

import unittest
import tensorshape as ts

class TestSignal(unittest.TestCase):

    def test_initial_value(self):
        signal = ts.create_signal(0)
        self.assertIsInstance(signal, ts.Signal)
        self.assertEqual(signal.value, 0)

    def test_subscribers_notified_in_order(self):
        signal = ts.create_signal(0)
        calls = []
        signal.subscribe(lambda v: calls.append(("first", v)))
        signal.subscribe(lambda v: calls.append(("second", v)))

        signal.value = 1
        signal.value = 2

        self.assertEqual(signal.value, 2)
        self.assertEqual(calls, [("first", 1), ("second", 1), ("first", 2), ("second", 2)])

    def test_value_set_before_notification(self):
        signal = ts.create_signal("a")
        observed = []
        signal.subscribe(lambda v: observed.append(signal.value))
        signal.value = "b"
        self.assertEqual(observed, ["b"])

    def test_unsubscribe(self):
        signal = ts.create_signal(0)
        calls = []
        unsubscribe = signal.subscribe(calls.append)
        signal.value = 1
        unsubscribe()
        signal.value = 2
        unsubscribe() # Second call is a no-op
        self.assertEqual(calls, [1])

    def test_unsubscribe_during_notification(self):
        signal = ts.create_signal(0)
        calls = []
        unsubscribe = None

        def once(value):
            calls.append(("once", value))
            unsubscribe()

        unsubscribe = signal.subscribe(once)
        signal.subscribe(lambda v: calls.append(("always", v)))
        signal.value = 1
        signal.value = 2
        self.assertEqual(calls, [("once", 1), ("always", 1), ("always", 2)])

    def test_tracks_shape(self):
        # Keep a derived element count in sync with a shape signal.
        shape = ts.create_signal(ts.Shape([2, 3]))
        length = ts.create_signal(ts.shape_length(shape.value))
        shape.subscribe(lambda s: setattr(length, "value", ts.shape_length(s)))
        shape.value = ts.to_shape([2, 3, 4], 2)
        self.assertEqual(length.value, 24)

if __name__ == '__main__':
    unittest.main()
