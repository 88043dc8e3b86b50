import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from errors import CapacityExceededError, EmptyHeapError
from heap_ import Heap, heapify, left, max_heap, min_heap, parent, right
from utils import compare_ascending, compare_descending


def assert_heap_order(test, heap):
    data = heap.to_list()
    for i in range(len(data)):
        for child in (left(i), right(i)):
            if child < len(data):
                test.assertLessEqual(heap.compare(data[i], data[child]), 0)


class TestIndexArithmetic(unittest.TestCase):

    def test_children_of_root(self):
        self.assertEqual(left(0), 1)
        self.assertEqual(right(0), 2)

    def test_parent_of_children(self):
        for i in range(50):
            self.assertEqual(parent(left(i)), i)
            self.assertEqual(parent(right(i)), i)


class TestHeap(unittest.TestCase):

    # Construction & Basic State
    def test_new_heap_is_empty(self):
        heap = min_heap()
        self.assertEqual(heap.size(), 0)
        self.assertTrue(heap.is_empty())
        self.assertEqual(len(heap), 0)

    def test_peek_on_empty_heap_raises(self):
        with self.assertRaises(EmptyHeapError):
            min_heap().peek_root()

    def test_extract_on_empty_heap_raises(self):
        heap = max_heap()
        with self.assertRaises(EmptyHeapError):
            heap.extract_root()

    def test_empty_heap_error_is_an_index_error(self):
        with self.assertRaises(IndexError):
            min_heap().extract_root()

    # Insert & Extract
    def test_min_heap_root_is_minimum(self):
        heap = min_heap()
        for v in [30, 10, 20]:
            heap.insert(v)
        self.assertEqual(heap.peek_root(), 10)

    def test_max_heap_root_is_maximum(self):
        heap = max_heap()
        for v in [30, 10, 20]:
            heap.insert(v)
        self.assertEqual(heap.peek_root(), 30)

    def test_extract_all_from_min_heap_yields_ascending(self):
        values = [5, 3, 8, 1, 9, 2, 7, 4, 6, 3, 3]
        heap = min_heap()
        for v in values:
            heap.insert(v)
        result = [heap.extract_root() for _ in range(len(values))]
        self.assertEqual(result, sorted(values))
        self.assertTrue(heap.is_empty())

    def test_extract_all_from_max_heap_yields_descending(self):
        values = [5, 3, 8, 1, 9, 2, 7, 4, 6]
        heap = max_heap()
        for v in values:
            heap.insert(v)
        result = [heap.extract_root() for _ in range(len(values))]
        self.assertEqual(result, sorted(values, reverse=True))

    def test_order_holds_after_mixed_operations(self):
        heap = min_heap(2)
        for v in [42, 17, 99, 3, 58, 23, 8, 71, 12, 64]:
            heap.insert(v)
            assert_heap_order(self, heap)
        for _ in range(4):
            heap.extract_root()
            assert_heap_order(self, heap)
        for v in [1, 100, 50]:
            heap.insert(v)
            assert_heap_order(self, heap)
        self.assertEqual(heap.size(), 9)

    def test_peek_is_idempotent(self):
        heap = min_heap()
        for v in [4, 2, 6]:
            heap.insert(v)
        peeks = [heap.peek_root() for _ in range(5)]
        self.assertEqual(peeks, [2] * 5)
        self.assertEqual(heap.size(), 3)

    def test_storage_grows_past_initial_size(self):
        heap = min_heap(1)
        for v in range(100, 0, -1):
            heap.insert(v)
        self.assertEqual(heap.size(), 100)
        self.assertEqual(heap.peek_root(), 1)

    def test_fixed_capacity_heap_rejects_overflow(self):
        heap = min_heap(2, fixed=True)
        heap.insert(1)
        heap.insert(2)
        with self.assertRaises(CapacityExceededError):
            heap.insert(3)
        self.assertEqual(heap.size(), 2)

    def test_custom_compare_on_tuples(self):
        heap = Heap(compare=lambda a, b: compare_ascending(a[1], b[1]))
        for task in [("write", 3), ("review", 1), ("deploy", 2)]:
            heap.insert(task)
        self.assertEqual([heap.extract_root()[0] for _ in range(3)], ["review", "deploy", "write"])

    def test_free_empties_heap(self):
        heap = min_heap()
        heap.insert(1)
        heap.free()
        self.assertTrue(heap.is_empty())

    # Remove
    def test_remove_middle_element_keeps_order(self):
        heap = Heap.heapify([9, 4, 7, 1, -2, 6, 5])
        heap.remove(4)
        assert_heap_order(self, heap)
        self.assertEqual([heap.extract_root() for _ in range(6)], [-2, 1, 5, 6, 7, 9])

    def test_remove_last_element(self):
        heap = Heap.heapify([1, 2, 3])
        heap.remove(3)
        self.assertEqual(heap.to_list(), [1, 2])

    def test_remove_missing_element_raises(self):
        heap = Heap.heapify([1, 2, 3])
        with self.assertRaises(ValueError):
            heap.remove(10)


class TestHeapify(unittest.TestCase):

    def test_heapify_example(self):
        heap = Heap.heapify([9, 4, 7, 1, -2, 6, 5], compare_ascending)
        self.assertEqual(heap.peek_root(), -2)
        self.assertEqual([heap.extract_root() for _ in range(7)], [-2, 1, 4, 5, 6, 7, 9])

    def test_heapify_does_not_modify_input(self):
        values = [3, 2, 1]
        Heap.heapify(values)
        self.assertEqual(values, [3, 2, 1])

    def test_heapify_in_place_on_list(self):
        values = [9, 4, 7, 1, -2, 6, 5]
        heapify(values, compare_descending)
        self.assertEqual(values[0], 9)
        for i in range(len(values)):
            for child in (left(i), right(i)):
                if child < len(values):
                    self.assertGreaterEqual(values[i], values[child])

    def test_heapify_empty(self):
        heap = Heap.heapify([])
        self.assertTrue(heap.is_empty())

    def test_heapify_is_linear(self):
        comparisons = [0]

        def counting_compare(a, b):
            comparisons[0] += 1
            return compare_ascending(a, b)

        n = 4096
        heap = Heap.heapify(list(range(n, 0, -1)), counting_compare)
        # n sequential inserts would need about n log n = 12n comparisons here
        self.assertLess(comparisons[0], 3 * n)
        self.assertEqual(heap.peek_root(), 1)

    def test_ties_pick_left_child(self):
        values = [(5, "root"), (1, "left"), (1, "right")]
        heapify(values, lambda a, b: compare_ascending(a[0], b[0]))
        self.assertEqual(values[0], (1, "left"))


if __name__ == "__main__":
    unittest.main()
