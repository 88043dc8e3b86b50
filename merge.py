from typing import Iterator, List

from heap_ import Heap
from list_ import Element


def compare_head(a, b) -> int:
    """Order merge entries (value, source_index, position) by value, then source."""
    if a[0] < b[0]:
        return -1
    if b[0] < a[0]:
        return 1
    return a[1] - b[1]


def iter_merge_k_sorted(sources) -> Iterator:
    """
    Lazily merge already-sorted sequences into one sorted stream.

    The heap holds at most one entry per source: (value, source_index,
    position). Empty sources are never seeded. O(n log k) overall.
    """
    heap = Heap(max(len(sources), 1), compare_head)
    for source_index, source in enumerate(sources):
        if len(source) > 0:
            heap.insert((source[0], source_index, 0))

    while not heap.is_empty():
        value, source_index, position = heap.extract_root()
        yield value

        source = sources[source_index]
        if position + 1 < len(source):
            heap.insert((source[position + 1], source_index, position + 1))


def merge_k_sorted(sources) -> List:
    return list(iter_merge_k_sorted(sources))


def merge_k_sorted_lists(heads):
    """
    Merge sorted linked lists (list_.Element heads) into a new linked list.

    The input nodes are left untouched; returns the head of the merged list,
    or None when every input is empty.
    """
    heap = Heap(max(len(heads), 1), compare_head)
    for source_index, head in enumerate(heads):
        if head is not None:
            heap.insert((head.data, source_index, head))

    merged_head = tail = None
    while not heap.is_empty():
        value, source_index, node = heap.extract_root()
        element = Element(value)
        if tail is None:
            merged_head = element
        else:
            tail.next = element
        tail = element

        if node.next is not None:
            heap.insert((node.next.data, source_index, node.next))

    return merged_head


def kth_smallest_in_matrix(matrix, k: int):
    """Return the k-th smallest value of a matrix whose rows are each sorted."""
    total = sum(len(row) for row in matrix)
    if not 1 <= k <= total:
        raise ValueError(f"k must be between 1 and {total}, got {k}")

    for count, value in enumerate(iter_merge_k_sorted(matrix), start=1):
        if count == k:
            return value
