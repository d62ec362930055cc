"""Exception classes for linkedq."""


class LinkedQError(Exception):
    """Base exception for all linkedq errors."""


class OutOfRangeError(LinkedQError, IndexError):
    """Raised when an insertion or removal position is outside the valid range."""


class EmptyCollectionError(LinkedQError, IndexError):
    """Raised when removing from a list with no elements."""


class EmptyQueueError(EmptyCollectionError):
    """Raised when dequeuing from an empty queue."""


class CapacityExceededError(LinkedQError):
    """Raised when an enqueue batch would exceed the queue's capacity."""
