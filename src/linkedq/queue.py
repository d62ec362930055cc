"""FIFO queue with an optional capacity bound."""

import logging
from collections.abc import Iterator
from typing import Generic

from linkedq.errors import CapacityExceededError, EmptyQueueError
from linkedq.linkedlist import LinkedList
from linkedq.options import QueueOptions
from linkedq.types import Capacity, T

logger = logging.getLogger(__name__)


class Queue(Generic[T]):
    """
    FIFO queue backed by a LinkedList.

    Values are enqueued at the tail and dequeued from the head. The queue
    never holds more than `capacity` values; a batch that does not fit is
    rejected as a whole.
    """

    def __init__(
        self,
        options: QueueOptions | None = None,
        *,
        capacity: Capacity | None = None,
    ) -> None:
        """
        Initialize the queue.

        Args:
            options: Queue options. Defaults to an unbounded queue.
            capacity: Shortcut for QueueOptions(capacity=...). Cannot be
                combined with options.

        Raises:
            TypeError: If both options and capacity are given
        """
        if options is not None and capacity is not None:
            raise TypeError("Pass either options or capacity, not both")
        if options is None:
            options = QueueOptions() if capacity is None else QueueOptions(capacity=capacity)

        self._options = options
        self._list = LinkedList[T]()

    @property
    def capacity(self) -> Capacity:
        """Maximum number of values the queue can hold."""
        return self._options.capacity

    @property
    def options(self) -> QueueOptions:
        """The options this queue was built with."""
        return self._options

    @property
    def length(self) -> int:
        """Number of values currently in the queue."""
        return self._list.length

    def enqueue(self, *values: T) -> None:
        """
        Add values to the tail of the queue, in argument order.

        Raises:
            CapacityExceededError: If the values do not all fit. Nothing is
                enqueued in that case.
        """
        available = self.available_size()
        if len(values) > available:
            logger.debug(
                "Rejected batch of %d values (available %s of %s)",
                len(values),
                available,
                self.capacity,
            )
            raise CapacityExceededError("Cannot enqueue. Queue capacity exceeded")

        self._list.push(*values)

    def dequeue(self) -> T:
        """
        Remove and return the oldest value.

        Raises:
            EmptyQueueError: If the queue is empty
        """
        if self.is_empty():
            raise EmptyQueueError("Cannot dequeue. Queue is empty")
        return self._list.shift()

    def clear(self) -> None:
        """Remove all values. The capacity is kept."""
        logger.debug("Clearing queue with %d values", self._list.length)
        self._list.clear()

    def available_size(self) -> Capacity:
        """Return how many more values fit (UNBOUNDED for an unbounded queue)."""
        return self.capacity - self.length

    def is_empty(self) -> bool:
        """Return True if the queue holds no values."""
        return self.length == 0

    def to_array(self) -> list[T]:
        """Return the values oldest first."""
        return self._list.to_array()

    def __iter__(self) -> Iterator[T]:
        return iter(self._list)

    def __len__(self) -> int:
        return self._list.length

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_array()!r}, capacity={self.capacity!r})"
