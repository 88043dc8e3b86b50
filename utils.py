def compare_ascending(a, b) -> int:
    """Three-way compare; smaller values go first (min-heap ordering)."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0

def compare_descending(a, b) -> int:
    """Three-way compare; larger values go first (max-heap ordering)."""
    return compare_ascending(b, a)

def reverse_compare(compare):
    return lambda a, b: compare(b, a)

def compare_by(key, compare=compare_ascending):
    """Build a compare function that orders elements by `key(element)`."""
    return lambda a, b: compare(key(a), key(b))
