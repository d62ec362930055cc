"""linkedq - Doubly-linked list and capacity-bounded FIFO queue."""

import logging

from linkedq.errors import (
    CapacityExceededError,
    EmptyCollectionError,
    EmptyQueueError,
    LinkedQError,
    OutOfRangeError,
)
from linkedq.linkedlist import LinkedList
from linkedq.options import QueueOptions
from linkedq.queue import Queue
from linkedq.types import UNBOUNDED, Capacity

__version__ = "0.0.1"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "LinkedList",
    "Queue",
    "QueueOptions",
    "UNBOUNDED",
    "Capacity",
    "LinkedQError",
    "OutOfRangeError",
    "EmptyCollectionError",
    "EmptyQueueError",
    "CapacityExceededError",
]
