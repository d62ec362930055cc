"""Shared fixtures for linkedq tests."""

from collections.abc import Callable
from typing import Any

import pytest

from linkedq import LinkedList


def _assert_invariants(lst: LinkedList[Any]) -> None:
    """Walk the chain both ways and check head/tail/length bookkeeping."""
    head, tail, length = lst._head, lst._tail, lst.length

    if length == 0:
        assert head is None
        assert tail is None
        return

    assert head is not None and tail is not None
    assert head.prev is None
    assert tail.next is None
    if length == 1:
        assert head is tail

    forward = []
    node = head
    while node is not None:
        if node.next is not None:
            assert node.next.prev is node
        forward.append(node)
        node = node.next
    assert len(forward) == length
    assert forward[-1] is tail

    backward = []
    node = tail
    while node is not None:
        if node.prev is not None:
            assert node.prev.next is node
        backward.append(node)
        node = node.prev
    assert backward == forward[::-1]


@pytest.fixture
def check_invariants() -> Callable[[LinkedList[Any]], None]:
    """Return a function asserting the structural invariants of a list."""
    return _assert_invariants
