import sys
import os
import random
import unittest

import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from heap_sort import heap_sort


class TestHeapSort(unittest.TestCase):

    def test_sorts_ascending(self):
        values = [9, 4, 7, 1, -2, 6, 5]
        heap_sort(values)
        self.assertEqual(values, [-2, 1, 4, 5, 6, 7, 9])

    def test_sorts_descending(self):
        values = [9, 4, 7, 1, -2, 6, 5]
        heap_sort(values, ascending=False)
        self.assertEqual(values, [9, 7, 6, 5, 4, 1, -2])

    def test_matches_builtin_sort_on_random_input(self):
        rng = random.Random(7)
        for n in (0, 1, 2, 3, 10, 257):
            values = [rng.randint(-50, 50) for _ in range(n)]
            expected = sorted(values)
            heap_sort(values)
            self.assertEqual(values, expected)

    def test_sorts_numpy_array_in_place(self):
        values = np.array([3, 1, 2, 5, 4])
        heap_sort(values)
        np.testing.assert_array_equal(values, np.array([1, 2, 3, 4, 5]))

    def test_key_function(self):
        words = ["pear", "fig", "banana", "kiwi"]
        heap_sort(words, key=len)
        self.assertEqual([len(w) for w in words], [3, 4, 4, 6])

    def test_is_not_stable(self):
        records = [(2, "a"), (2, "b"), (1, "c")]
        heap_sort(records, key=lambda r: r[0])
        # (2, "a") went in before (2, "b") but comes out after it
        self.assertEqual(records, [(1, "c"), (2, "b"), (2, "a")])


if __name__ == "__main__":
    unittest.main()
