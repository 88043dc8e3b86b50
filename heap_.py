"""
Array-backed binary heap.

Nodes are stored breadth-first in a contiguous store, so for the node at
index i:

    parent(i) = (i - 1) // 2
    left(i)   = 2i + 1
    right(i)  = 2i + 2

The ordering is a three-way compare function (see utils.py): compare(a, b)
is negative when a belongs closer to the root than b. compare_ascending
gives a min-heap and compare_descending a max-heap.
"""

from array_ import Array
from errors import EmptyHeapError
from utils import compare_ascending, compare_descending


def parent(i):
    return (i - 1) // 2

def left(i):
    return 2 * i + 1

def right(i):
    return 2 * i + 2


# Helper function to maintain heap property from child to parent
def sift_up(data, i, compare):
    while i > 0:
        p = parent(i)
        if compare(data[i], data[p]) >= 0:
            break
        data[i], data[p] = data[p], data[i]
        i = p


# Helper function to maintain heap property from parent to child.
# Only the first n slots of data belong to the heap.
def sift_down(data, i, n, compare):
    while True:
        l = left(i)
        r = right(i)
        best = i

        if l < n and compare(data[l], data[best]) < 0:
            best = l
        # strict, so the left child wins ties
        if r < n and compare(data[r], data[best]) < 0:
            best = r

        if best == i:
            break

        data[i], data[best] = data[best], data[i]
        i = best


def heapify(data, compare=compare_ascending, n=None):
    """
    Rearrange the first n items of a mutable sequence into a heap, in place.

    Sifts down every non-leaf from index n // 2 - 1 back to the root, which
    costs O(n) comparisons in total.
    """
    if n is None:
        n = len(data)
    for i in range(n // 2 - 1, -1, -1):
        sift_down(data, i, n, compare)
    return data


class Heap:
    def __init__(self, size=16, compare=compare_ascending, fixed=False):
        self.compare = compare
        self.data = Array(size, fixed=fixed)

    @classmethod
    def heapify(cls, values, compare=compare_ascending, fixed=False):
        """Build a heap from `values` in one bottom-up pass."""
        heap = cls(len(values), compare, fixed=fixed)
        for value in values:
            heap.data.insert(value)
        heapify(heap.data, compare)
        return heap

    def insert(self, data):
        self.data.insert(data)
        sift_up(self.data, self.data.length() - 1, self.compare)

    def extract_root(self):
        if self.data.length() == 0:
            raise EmptyHeapError("extract_root from an empty heap")

        # Get the root and move the last element to the root
        root = self.data[0]
        last = self.data.pop()
        if self.data.length() > 0:
            self.data[0] = last
            sift_down(self.data, 0, self.data.length(), self.compare)

        return root

    def peek_root(self):
        if self.data.length() == 0:
            raise EmptyHeapError("peek_root on an empty heap")
        return self.data[0]

    def remove(self, data, is_equal=None):
        """Delete one element equal to `data`; O(n) search, O(log n) repair."""
        n = self.data.length()
        for i in range(n):
            item = self.data[i]
            if (is_equal(item, data) if is_equal is not None else item == data):
                break
        else:
            raise ValueError(f"{data!r} is not in the heap")

        last = self.data.pop()
        if i < n - 1:
            self.data[i] = last
            sift_up(self.data, i, self.compare)
            sift_down(self.data, i, n - 1, self.compare)

    def size(self):
        return self.data.length()

    def is_empty(self):
        return self.data.length() == 0

    def to_list(self):
        return self.data.to_list()

    def free(self):
        self.data.delete_all()

    def __len__(self):
        return self.data.length()

    def __repr__(self):
        return f"Heap({self.to_list()!r})"


def min_heap(size=16, fixed=False):
    return Heap(size, compare_ascending, fixed=fixed)

def max_heap(size=16, fixed=False):
    return Heap(size, compare_descending, fixed=fixed)
