"""Walk-throughs exercising each of the data structures."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from dsdrills.doubly import DoublyList
from dsdrills.fifo import Queue
from dsdrills.linkedlist import LinkedList, merge_into
from dsdrills.stack import Stack


def _linked_list_demo() -> str:
    first = LinkedList()
    for value in (8, 4, 2, 6):
        first.insert(value)
    second = LinkedList()
    for value in (1, 10, 0, 5):
        second.insert(value)

    parts = [first.render(), second.render(), "\n"]
    merge_into(first, second)
    parts.append(first.render())
    first.remove_at(0)
    parts.append(first.render())
    parts.append(f"LinkedList(3) =  {first[3]}\n")
    return "".join(parts)


def _queue_demo() -> str:
    queue = Queue([0, -2, 4, 6, -10])
    queue.dequeue()
    parts = [queue.render()]
    queue.remove_negatives()
    parts.append(queue.render())
    return "".join(parts)


def _stack_demo() -> str:
    stack = Stack([8, 6, 4, 2, 0])
    stack.pop()
    return stack.render()


def _doubly_demo() -> str:
    dlist = DoublyList()
    dlist.add_at_front(4)
    dlist.add_at_front(3)
    dlist.add_at_rear(2)
    dlist.add_at_front(0)
    dlist.add_at_rear(1)
    return dlist.render_from_front() + "\n" + dlist.render_from_rear()


def _combined_demo() -> str:
    linked = LinkedList()
    for value in (2, 4, 6):
        linked.add_at_front(value)
    for value in (8, 10, 12):
        linked.add_at_last(value)
    queue = Queue([2, -4, 6, -8])
    stack = Stack([1, 3, 5, 7, 9])
    return linked.render() + queue.render() + stack.render()


def run_demo() -> str:
    """Run every walk-through and return what they print."""
    sections = [
        _linked_list_demo(),
        _queue_demo(),
        _stack_demo(),
        _doubly_demo(),
        _combined_demo(),
    ]
    return "\n".join(sections)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the walk-throughs to standard output."""
    if argv is None:
        argv = sys.argv[1:]
    sys.stdout.write(run_demo())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())