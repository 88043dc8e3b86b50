from typing import List

from heap_ import Heap
from utils import compare_ascending, compare_descending, compare_by


def _bounded_select(values, k, compare):
    """
    Keep the k elements that compare last under `compare`.

    The heap root is always the weakest of the retained elements, so it is
    the one evicted once the heap grows past k. Returns the survivors
    strongest first.
    """
    heap = Heap(compare=compare)
    for value in values:
        heap.insert(value)
        if heap.size() > k:
            heap.extract_root()

    selected = []
    while not heap.is_empty():
        selected.append(heap.extract_root())
    selected.reverse()
    return selected


def top_k(values, k: int, select_largest: bool = True) -> List:
    """Return the k largest (or smallest) values, best first. O(n log k)."""
    if k <= 0:
        return []
    compare = compare_ascending if select_largest else compare_descending
    return _bounded_select(values, k, compare)


def _compare_frequency(a, b) -> int:
    # Lower count is weaker; on equal counts the larger value is weaker.
    if a[1] != b[1]:
        return compare_ascending(a[1], b[1])
    return compare_descending(a[0], b[0])


def top_k_frequent(values, k: int) -> List:
    """
    Return the k most frequent values, most frequent first.

    Values sharing a count at the cut-off are resolved in favour of the
    smaller value, so the result does not depend on dict ordering.
    """
    if k <= 0:
        return []

    frequency = {}
    for value in values:
        frequency[value] = frequency.get(value, 0) + 1

    selected = _bounded_select(frequency.items(), k, _compare_frequency)
    return [value for value, _ in selected]


def _kth(values, k, compare):
    n = len(values)
    if not 1 <= k <= n:
        raise ValueError(f"k must be between 1 and {n}, got {k}")
    heap = Heap(k + 1, compare)
    for value in values:
        heap.insert(value)
        if heap.size() > k:
            heap.extract_root()
    return heap.peek_root()


def kth_largest(values, k: int):
    return _kth(values, k, compare_ascending)


def kth_smallest(values, k: int):
    return _kth(values, k, compare_descending)


def _squared_distance(point):
    return point[0] * point[0] + point[1] * point[1]


def k_closest(points, k: int) -> List:
    """Return the k points nearest the origin, nearest first."""
    if k <= 0:
        return []
    return _bounded_select(points, k, compare_by(_squared_distance, compare_descending))
