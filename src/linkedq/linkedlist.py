"""Doubly-linked list with head/tail pointers and positional access."""

import logging
import operator
from collections.abc import Iterable, Iterator
from typing import Generic

from linkedq.errors import EmptyCollectionError, OutOfRangeError
from linkedq.types import T

logger = logging.getLogger(__name__)


class Node(Generic[T]):
    """A node in the doubly-linked list."""

    __slots__ = ("value", "prev", "next")

    def __init__(self, value: T) -> None:
        self.value = value
        self.prev: Node[T] | None = None
        self.next: Node[T] | None = None

    def unlink(self) -> None:
        """Clear both links of this node."""
        self.prev = None
        self.next = None


class LinkedList(Generic[T]):
    """
    Doubly-linked list of values.

    Nodes are owned by the list and never handed out; every operation takes
    and returns plain values. Appending and removing at either end is O(1),
    positional add/remove walk from the head and are O(position).
    """

    def __init__(self, iterable: Iterable[T] | None = None) -> None:
        """
        Initialize the list.

        Args:
            iterable: Optional initial values, pushed in order. A value that
                is not iterable is ignored and the list starts empty.
        """
        self._head: Node[T] | None = None
        self._tail: Node[T] | None = None
        self._length = 0

        if iterable is None:
            return
        try:
            values = iter(iterable)
        except TypeError:
            logger.debug("Ignoring non-iterable initializer of type %s", type(iterable).__name__)
            return
        self.push(*values)

    @property
    def length(self) -> int:
        """Number of values in the list."""
        return self._length

    def add(self, value: T, position: int) -> None:
        """
        Insert a value so that it ends up at the given position.

        Args:
            value: Value to insert
            position: Index of the value after insertion, 0 <= position <= length

        Raises:
            OutOfRangeError: If position is outside 0..length
        """
        position = operator.index(position)
        if position < 0 or position > self._length:
            raise OutOfRangeError("Cannot add value. Out of range.")

        if position == 0:
            self.unshift(value)
        elif position == self._length:
            self.push(value)
        else:
            prev = self._node_at(position - 1)
            nxt = prev.next
            assert nxt is not None
            node = Node(value)
            node.prev = prev
            node.next = nxt
            prev.next = node
            nxt.prev = node
            self._length += 1

    def push(self, *values: T) -> None:
        """Append values to the tail, in argument order. O(1) per value."""
        for value in values:
            node = Node(value)
            if self._tail is None:
                self._head = node
                self._tail = node
            else:
                node.prev = self._tail
                self._tail.next = node
                self._tail = node
            self._length += 1

    def unshift(self, *values: T) -> None:
        """
        Prepend values to the head, keeping their argument order.

        unshift(1, 2) on [3] gives [1, 2, 3]. O(1) per value.
        """
        for value in reversed(values):
            node = Node(value)
            if self._head is None:
                self._head = node
                self._tail = node
            else:
                node.next = self._head
                self._head.prev = node
                self._head = node
            self._length += 1

    def remove(self, position: int) -> T:
        """
        Remove and return the value at the given position.

        Args:
            position: Index of the value, 0 <= position < length

        Returns:
            The removed value

        Raises:
            EmptyCollectionError: If the list is empty
            OutOfRangeError: If position is outside 0..length-1
        """
        if self._length == 0:
            raise EmptyCollectionError("Cannot remove() from an empty list")

        position = operator.index(position)
        if position < 0 or position >= self._length:
            raise OutOfRangeError("Cannot remove a value. Out of range.")

        if position == 0:
            return self.shift()
        if position == self._length - 1:
            return self.pop()

        node = self._node_at(position)
        prev, nxt = node.prev, node.next
        assert prev is not None and nxt is not None
        prev.next = nxt
        nxt.prev = prev
        node.unlink()
        self._length -= 1
        return node.value

    def pop(self) -> T:
        """
        Remove and return the tail value. O(1).

        Raises:
            EmptyCollectionError: If the list is empty
        """
        node = self._tail
        if node is None:
            raise EmptyCollectionError("Cannot pop() from an empty list")

        if node.prev is None:
            self._head = None
            self._tail = None
        else:
            self._tail = node.prev
            self._tail.next = None
        node.unlink()
        self._length -= 1
        return node.value

    def shift(self) -> T:
        """
        Remove and return the head value. O(1).

        Raises:
            EmptyCollectionError: If the list is empty
        """
        node = self._head
        if node is None:
            raise EmptyCollectionError("Cannot shift() from an empty list")

        if node.next is None:
            self._head = None
            self._tail = None
        else:
            self._head = node.next
            self._head.prev = None
        node.unlink()
        self._length -= 1
        return node.value

    def clear(self) -> None:
        """Remove all values from the list."""
        node = self._head
        while node is not None:
            nxt = node.next
            node.unlink()
            node = nxt
        self._head = None
        self._tail = None
        self._length = 0

    def to_array(self) -> list[T]:
        """Return the values from head to tail as a new list."""
        return list(self)

    def _node_at(self, position: int) -> Node[T]:
        """Walk from the head to the node at position (caller checks bounds)."""
        node = self._head
        for _ in range(position):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def __iter__(self) -> Iterator[T]:
        """
        Iterate values from head to tail.

        Each call starts again from the current head. Mutating the list while
        an iteration is in progress is not supported.
        """
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        """Iterate values from tail to head."""
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        """Return the number of values in the list."""
        return self._length

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._length > 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_array()!r})"
