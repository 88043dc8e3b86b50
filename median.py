from typing import List

from errors import NoDataError
from heap_ import Heap, max_heap, min_heap


def _rebalance(lower: Heap, upper: Heap):
    # lower may hold exactly one more element than upper, never fewer
    while lower.size() > upper.size() + 1:
        upper.insert(lower.extract_root())
    while upper.size() > lower.size():
        lower.insert(upper.extract_root())


def _median(lower: Heap, upper: Heap) -> float:
    if lower.size() > upper.size():
        return float(lower.peek_root())
    return (lower.peek_root() + upper.peek_root()) / 2.0


class MedianTracker:
    """
    Running median of a stream of numbers.

    `lower` is a max-heap holding the smaller half of the stream and `upper`
    a min-heap holding the larger half. After every add_num the halves
    differ in size by at most one, with any extra element in `lower`.
    """

    def __init__(self):
        self.lower = max_heap()
        self.upper = min_heap()

    def add_num(self, value):
        if self.lower.is_empty() or value <= self.lower.peek_root():
            self.lower.insert(value)
        else:
            self.upper.insert(value)
        _rebalance(self.lower, self.upper)

    def find_median(self) -> float:
        if self.lower.is_empty():
            raise NoDataError("find_median called before any add_num")
        return _median(self.lower, self.upper)

    def size(self):
        return self.lower.size() + self.upper.size()

    def __len__(self):
        return self.size()


def median_sliding_window(values, k: int) -> List[float]:
    """
    Return the median of every window of k consecutive values.

    Each step adds the incoming value, removes the outgoing one from
    whichever half holds it, and rebalances. Removal is a linear search, so
    the whole pass is O(n k).
    """
    if k <= 0:
        raise ValueError(f"window size must be positive, got {k}")

    lower = max_heap(k + 1)
    upper = min_heap(k + 1)
    medians = []

    for i, value in enumerate(values):
        if lower.is_empty() or value <= lower.peek_root():
            lower.insert(value)
        else:
            upper.insert(value)

        if i >= k:
            outgoing = values[i - k]
            if outgoing <= lower.peek_root():
                lower.remove(outgoing)
            else:
                upper.remove(outgoing)

        _rebalance(lower, upper)

        if i >= k - 1:
            medians.append(_median(lower, upper))

    return medians
