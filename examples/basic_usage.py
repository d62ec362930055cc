"""Basic usage example for linkedq."""

import logging

from linkedq import CapacityExceededError, LinkedList, Queue


def main() -> None:
    """Demonstrate list and queue operations."""
    logging.basicConfig(level=logging.DEBUG)

    print("=== LinkedList ===\n")
    lst = LinkedList(["b", "d"])
    lst.unshift("a")
    lst.add("c", 2)
    lst.push("e", "f")
    print(f"List: {lst.to_array()} (length {lst.length})")
    print(f"Removed from position 3: {lst.remove(3)}")
    print(f"Popped: {lst.pop()}, shifted: {lst.shift()}")
    print(f"Reversed: {list(reversed(lst))}\n")

    print("=== Bounded Queue ===\n")
    queue = Queue[dict](capacity=3)
    queue.enqueue(
        {"action": "send_email", "to": "user@example.com"},
        {"action": "process_data", "records": 100},
    )
    print(f"Queue size: {queue.length}, available: {queue.available_size()}")

    try:
        queue.enqueue({"action": "a"}, {"action": "b"})
    except CapacityExceededError as exc:
        print(f"Rejected batch: {exc} (size still {queue.length})\n")

    print("Consumer: Processing tasks...")
    while not queue.is_empty():
        task = queue.dequeue()
        print(f"  Processing {task}")

    print(f"\nFinal queue size: {queue.length}")


if __name__ == "__main__":
    main()
