from heap_ import Heap, min_heap
from utils import compare_ascending, compare_descending


def last_stone_weight(stones) -> int:
    """
    Smash the two heaviest stones together until at most one remains.

    Equal stones are both destroyed; otherwise the difference goes back on
    the pile. Returns the weight of the last stone, or 0.
    """
    heap = Heap.heapify(list(stones), compare_descending)
    while heap.size() > 1:
        first = heap.extract_root()
        second = heap.extract_root()
        if first != second:
            heap.insert(first - second)
    return 0 if heap.is_empty() else heap.extract_root()


def _compare_char_count(a, b) -> int:
    # Higher remaining count first, then the smaller character.
    if a[0] != b[0]:
        return compare_descending(a[0], b[0])
    return compare_ascending(a[1], b[1])


def reorganize_string(s: str) -> str:
    """Rearrange s so that no two adjacent characters are equal, or return ""."""
    count = {}
    for char in s:
        count[char] = count.get(char, 0) + 1

    heap = Heap.heapify([(n, char) for char, n in count.items()], _compare_char_count)
    result = []
    held = None

    # The character just written is held back for one round.
    while not heap.is_empty():
        n, char = heap.extract_root()
        result.append(char)
        if held is not None:
            heap.insert(held)
        held = (n - 1, char) if n > 1 else None

    return "".join(result) if len(result) == len(s) else ""


def nth_ugly_number(n: int) -> int:
    """Return the n-th positive integer whose only prime factors are 2, 3 and 5."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")

    heap = min_heap()
    heap.insert(1)
    seen = {1}
    ugly = 1
    for _ in range(n):
        ugly = heap.extract_root()
        for factor in (2, 3, 5):
            candidate = ugly * factor
            if candidate not in seen:
                seen.add(candidate)
                heap.insert(candidate)
    return ugly
