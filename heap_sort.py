from heap_ import heapify, sift_down
from utils import compare_ascending, compare_by, reverse_compare


def heap_sort(values, ascending=True, key=None):
    """
    Sort a mutable sequence in place with O(1) extra space.

    Ascending order builds a max-heap and moves the root to the end of the
    unsorted region on every pass; descending order does the same with a
    min-heap. Works on lists and on one-dimensional numpy arrays.

    Heap sort is not stable: elements that compare equal (for example under
    `key`) can come out in a different relative order than they went in.

    :param values: Mutable sequence to sort.
    :param ascending: Smallest first when True, largest first otherwise.
    :param key: Optional function deriving the sort key of each element.
    """
    compare = compare_ascending
    if key is not None:
        compare = compare_by(key, compare)
    # The root of the working heap is the element that belongs at the end.
    if ascending:
        compare = reverse_compare(compare)

    n = len(values)
    heapify(values, compare, n)

    for end in range(n - 1, 0, -1):
        values[0], values[end] = values[end], values[0]
        sift_down(values, 0, end, compare)
