class HeapError(Exception):
    """Base class for every error raised by the heap modules."""


class EmptyHeapError(HeapError, IndexError):
    """Raised when the root of an empty heap is read or extracted."""


class NoDataError(EmptyHeapError):
    """Raised when a median is requested before any number was added."""


class CapacityExceededError(HeapError, OverflowError):
    """Raised when inserting into a full fixed-capacity store."""
